"""Evaluation prompt sent alongside the image to the validation model."""

from imageassertions.core.models import ImageTone

VALIDATION_PROMPT_TEMPLATE = """Analyze the following image and assertions, and return a single JSON object with this structure:

{{
  "assertionsMet": boolean,
  "score": number,             // confidence score 0-10
  "tone": string,              // tone classification
  "explanation": string        // explanation of the evaluation
}}

SCORING GUIDELINES:
10: All assertions perfectly match the image content and style.
7-9: Most assertions strongly match with minor discrepancies.
4-6: Some assertions partially match with significant gaps.
0-3: Few or no assertions match the image content.

TONE CLASSIFICATION:
The "tone" must be one of: {tones}

Definitions:
{definitions}

Evaluate the image against this assertion:
"{assertion}"

IMPORTANT: "assertionsMet" should be true only if all key details in the assertion are visually matched in the image."""


def build_validation_prompt(assertion_prompt: str) -> str:
    """Embed the caller's assertion verbatim into the evaluation prompt."""
    tones = ", ".join(tone.value for tone in ImageTone)
    definitions = "\n".join(f'- "{tone.value}": {tone.definition}' for tone in ImageTone)
    return VALIDATION_PROMPT_TEMPLATE.format(
        tones=tones,
        definitions=definitions,
        assertion=assertion_prompt,
    )
