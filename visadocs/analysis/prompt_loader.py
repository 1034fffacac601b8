from pathlib import Path

from visadocs.analysis.exceptions import ExtractionError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"

PROMPT_FILES: dict[str, str] = {
    "I-94": "i94.txt",
    "I-20": "i20.txt",
    "H-1B": "h1b.txt",
}


def load_prompt(document_type: str, prompt_dir: Path | None = None) -> str:
    """Build the analysis prompt for a document type.

    The shared envelope instructions come first, followed by the
    type-specific section. Unknown types get the envelope only.

    Raises:
        ExtractionError: if a prompt file cannot be read.
    """
    directory = prompt_dir if prompt_dir is not None else _DEFAULT_PROMPT_DIR
    base = _read(directory / "base.txt").rstrip()
    section_file = PROMPT_FILES.get(document_type)
    if section_file is None:
        return base
    section = _read(directory / section_file).rstrip()
    return f"{base}\n\n{section}"


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ExtractionError(f"Failed to load prompt template: {exc}") from exc
