from pathlib import Path

from docsum.summarization.models import SummaryLength

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(length: SummaryLength, prompt_dir: Path | None = None) -> str:
    """Load the prompt template for one summary length.

    Args:
        length: Summary length whose template is wanted.
        prompt_dir: Directory holding ``<length>.txt`` templates.
                    Defaults to the bundled prompts directory.

    Returns:
        The raw template string with a ``{document_text}`` placeholder.

    Raises:
        OSError: if the template file cannot be read.
        ValueError: if the template has no ``{document_text}`` placeholder.
    """
    path = (prompt_dir or _DEFAULT_PROMPT_DIR) / f"{length.value}.txt"
    template = path.read_text(encoding="utf-8")
    if "{document_text}" not in template:
        raise ValueError(f"Prompt template {path} has no {{document_text}} placeholder")
    return template


def load_prompt_templates(prompt_dir: Path | None = None) -> dict[SummaryLength, str]:
    """Load the templates for every summary length."""
    return {length: load_prompt_template(length, prompt_dir) for length in SummaryLength}
