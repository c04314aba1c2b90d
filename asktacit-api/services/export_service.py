import html
from datetime import date
from typing import Dict, List, Optional

NO_RESPONSE = "No response provided"

STYLE = """
      body { font-family: Arial, sans-serif; line-height: 1.6; color: #333; margin: 0; padding: 20px; }
      .header { text-align: center; margin-bottom: 30px; padding-bottom: 10px; border-bottom: 1px solid #ddd; }
      .title { color: #5b21b6; font-size: 24px; margin-bottom: 5px; }
      .date { color: #666; font-size: 14px; }
      .response-section { margin-bottom: 30px; padding-bottom: 20px; border-bottom: 1px solid #eee; }
      h3 { color: #5b21b6; margin-bottom: 10px; }
      h4 { margin-top: 15px; margin-bottom: 10px; color: #666; }
      .element-content { background-color: #f9f9f9; padding: 15px; border-radius: 5px; margin-bottom: 15px; }
      .response-content { padding: 0 15px; }
      p { margin: 10px 0; }
      .footer { margin-top: 40px; text-align: center; font-size: 12px; color: #666; }
"""


def escape_text(text: Optional[str]) -> str:
    """HTML-escape text and keep its line breaks."""
    if not text:
        return ""
    return html.escape(text, quote=True).replace("\n", "<br/>")


def generate_export_html(
        rfp_title: str,
        elements: List[str],
        responses: Dict[int, str],
        generated_on: Optional[date] = None
    ) -> str:
    """
    Render elements and their responses as a standalone printable HTML page.
    The browser turns it into a PDF.
    """
    generated_on = generated_on or date.today()
    title = escape_text(rfp_title)
    date_text = generated_on.strftime("%m/%d/%Y")

    sections = []
    for index, element in enumerate(elements):
        response_text = responses.get(index) or NO_RESPONSE
        sections.append(f"""
      <div class="response-section">
        <h3>Element {index + 1}</h3>
        <div class="element-content">
          <p>{escape_text(element)}</p>
        </div>
        <div class="response-content">
          <h4>Response:</h4>
          <p>{escape_text(response_text)}</p>
        </div>
      </div>""")

    body = "".join(sections)

    return f"""<!DOCTYPE html>
<html>
  <head>
    <meta charset="utf-8">
    <title>RFP Response: {title}</title>
    <style>{STYLE}    </style>
  </head>
  <body>
    <div class="header">
      <h1 class="title">RFP Response: {title}</h1>
      <p class="date">Generated on {date_text}</p>
    </div>
{body}

    <div class="footer">
      <p>Generated by AskTacit RFP Assistant</p>
    </div>
  </body>
</html>
"""
