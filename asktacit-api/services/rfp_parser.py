"""
Turns a free-form assistant answer into numbered elements and responses.

The assistant is asked to answer in two sections:

    ## EXTRACTED ELEMENTS
    1. <first question/requirement>
    2. <second question/requirement>

    ## RESPONSES
    1. <response to first element>
    2. <response to second element>

Nothing guarantees that it does, so parsing never fails. When no numbered
element can be found, every non-blank line of the answer becomes an element
paired with UNPARSEABLE_RESPONSE.
"""
from typing import Dict, List, Optional, Tuple
from models.parsed_rfp import ParsedRfp, UNPARSEABLE_RESPONSE
from core.logger import get_logger

logger = get_logger(__name__)

ELEMENTS_MARKER = "## EXTRACTED ELEMENTS"
RESPONSES_MARKER = "## RESPONSES"
DIGITS = "0123456789"


def split_lines(text: str) -> List[str]:
    return [line.rstrip("\r") for line in text.split("\n")]


def is_blank(line: str) -> bool:
    return not line.strip()


def split_numbered_line(line: str) -> Optional[Tuple[int, str]]:
    """
    Split a numbered-list line such as "12. Provide SOC 2 report" into
    (12, "Provide SOC 2 report").

    Returns None unless the stripped line is one or more digits followed by a
    period. The text after it may be empty, so "2." gives (2, ""). "1)" and
    bullets don't count.
    """
    stripped = line.strip()
    end = 0
    while end < len(stripped) and stripped[end] in DIGITS:
        end += 1

    if end == 0 or end >= len(stripped) or stripped[end] != ".":
        return None

    return int(stripped[:end]), stripped[end + 1:].lstrip()


def find_marker(lines: List[str], marker: str, start: int = 0) -> int:
    for position in range(start, len(lines)):
        if lines[position].rstrip() == marker:
            return position
    return -1


def section_blocks(lines: List[str]) -> Tuple[List[str], List[str]]:
    """Return the (elements, responses) section bodies, empty when a marker is missing."""
    elements_block: List[str] = []
    responses_block: List[str] = []

    elements_at = find_marker(lines, ELEMENTS_MARKER)
    if elements_at >= 0:
        elements_end = find_marker(lines, RESPONSES_MARKER, elements_at + 1)
        if elements_end < 0:
            elements_end = len(lines)
        elements_block = lines[elements_at + 1:elements_end]

    responses_at = find_marker(lines, RESPONSES_MARKER)
    if responses_at >= 0:
        responses_block = lines[responses_at + 1:]

    return elements_block, responses_block


def extract_elements(lines: List[str]) -> List[str]:
    elements = []
    for line in lines:
        if is_blank(line):
            continue
        numbered = split_numbered_line(line)
        if numbered is not None:
            elements.append(numbered[1])
    return elements


def extract_responses(lines: List[str]) -> Dict[int, str]:
    """
    Collect numbered responses, each possibly spanning several lines.

    A numbered line closes the open response and opens index number - 1.
    Unnumbered lines continue the open response, or are dropped when none is
    open. A repeated number overwrites the earlier response. Numbers are not
    checked against the element count.
    """
    responses: Dict[int, str] = {}
    current: Optional[Tuple[int, str]] = None

    for line in lines:
        if is_blank(line):
            continue

        numbered = split_numbered_line(line)
        if numbered is not None:
            commit_response(responses, current)
            number, text = numbered
            # "0." has no zero-based slot; it leaves no response open
            current = (number - 1, text) if number > 0 else None
        elif current is not None:
            index, text = current
            current = (index, text + "\n" + line)

    commit_response(responses, current)
    return responses


def commit_response(responses: Dict[int, str], current: Optional[Tuple[int, str]]) -> None:
    if current is None:
        return
    index, text = current
    if text:
        responses[index] = text.strip()


def parse_ai_response(raw_answer: str) -> ParsedRfp:
    """Parse one assistant answer into a fresh ParsedRfp. Never raises for string input."""
    lines = split_lines(raw_answer)
    elements_block, responses_block = section_blocks(lines)

    elements = extract_elements(elements_block)
    if elements:
        responses = extract_responses(responses_block)
    else:
        elements = [line for line in lines if not is_blank(line)]
        responses = {index: UNPARSEABLE_RESPONSE for index in range(len(elements))}
        logger.debug(f"No numbered elements found, fell back to {len(elements)} plain lines")

    logger.debug(f"Parsed {len(elements)} elements and {len(responses)} responses")
    return ParsedRfp(elements=elements, responses=responses, raw_response=raw_answer)
