"""
This module contains the prompts sent to the Alltius assistants.
The RFP prompt asks for the two-section numbered layout that
services.rfp_parser knows how to read back.
"""

RFP_PARSE_PROMPT = """
Please analyze the following RFP (Request for Proposal) text and:
1. Extract all the questions or requirements that need responses
2. Generate a professional response for each extracted element

RFP TEXT:
{rfp_text}

FORMAT YOUR RESPONSE AS:
## EXTRACTED ELEMENTS
1. [First question/requirement]
2. [Second question/requirement]
...

## RESPONSES
1. [Response to first element]
2. [Response to second element]
...
"""


def build_rfp_parse_prompt(rfp_text: str) -> str:
    return RFP_PARSE_PROMPT.format(rfp_text=rfp_text)
