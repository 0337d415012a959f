"""
Prompt Construction
===================

Serializes an ArtifactSet into the request sent to delegating backends.

Layout:
    <instruction header>
    <output contract>
    == path/one ==
    <content>

    == path/two ==
    <content>
"""

from .artifacts import ArtifactSet
from .schemas import OutputFormat


SYSTEM_PROMPT_TEMPLATE = (
    "You are an expert at detecting contradictions between source code and "
    "its documentation and at reporting them clearly. "
    "Always answer in the requested output format. "
    "Write descriptions in the language of the locale LANG={locale}."
)

INSTRUCTION_HEADER = (
    "Compare the following files and find every mismatch or contradiction "
    "between them.\n"
)

LINE_FORMAT_CONTRACT = (
    "Report each contradiction on its own line, in exactly this format:\n"
    "<file1 path>,<file2 path>:<description of the contradiction>\n"
    "Use the file paths exactly as they appear in the section headers below.\n"
    "If there are no contradictions, output nothing at all.\n\n"
)

JSON_FORMAT_CONTRACT = (
    "Always answer with JSON in the following format:\n"
    "```json\n"
    "{\n"
    "  \"summary\": \"overall assessment (summary of the contradictions)\",\n"
    "  \"errors\": [\n"
    "    {\n"
    "      \"file1\": \"path of the first file\",\n"
    "      \"file2\": \"path of the second file\",\n"
    "      \"description\": \"detailed description of the contradiction\"\n"
    "    }\n"
    "  ]\n"
    "}\n"
    "```\n"
    "Use the file paths exactly as they appear in the section headers below.\n"
    "If there are no contradictions, leave the errors array empty.\n\n"
)

_CONTRACTS = {
    OutputFormat.LINE: LINE_FORMAT_CONTRACT,
    OutputFormat.JSON: JSON_FORMAT_CONTRACT,
}


def build_system_prompt(locale: str) -> str:
    """System instruction, carrying the reply-language hint"""
    return SYSTEM_PROMPT_TEMPLATE.format(locale=locale)


def build_prompt(artifacts: ArtifactSet, output_format: OutputFormat) -> str:
    """
    Build the user prompt for an artifact set.

    Deterministic: the same artifacts in the same order always produce the
    same prompt.
    """
    parts = [INSTRUCTION_HEADER, _CONTRACTS[output_format]]

    for artifact in artifacts:
        parts.append(f"== {artifact.identifier} ==\n")
        parts.append(artifact.content)
        parts.append("\n\n")

    return "".join(parts)
