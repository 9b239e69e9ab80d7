import logging
from pathlib import Path

import yaml

from .prompt import Prompt

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"


def _version_key(version: str) -> tuple:
    # "1.10" sorts after "1.9"; non-numeric parts compare as text
    return tuple((0, int(p), "") if p.isdigit() else (1, 0, p) for p in version.split("."))


class PromptsLibrary:
    """Versioned prompt templates loaded from a directory of YAML files."""

    def __init__(self, directory: str | Path = TEMPLATES_DIR) -> None:
        self._prompts: dict[tuple[str, str], Prompt] = {}
        logger.info("Initializing PromptsLibrary from directory: %s", directory)
        self._load_all(Path(directory))
        logger.info("Loaded %d prompts", len(self._prompts))

    def get(self, name: str, version: str) -> Prompt:
        logger.debug("Getting prompt: name=%s, version=%s", name, version)
        try:
            return self._prompts[(name, version)]
        except KeyError:
            logger.error("Prompt not found: name=%s, version=%s", name, version)
            raise KeyError(f"Prompt '{name}' version '{version}' not found")

    def latest(self, name: str) -> Prompt:
        """Highest version of ``name``, compared numerically per dotted part."""
        versions = [v for (n, v) in self._prompts if n == name]
        if not versions:
            logger.error("Prompt not found: name=%s", name)
            raise KeyError(f"Prompt '{name}' not found")
        return self._prompts[(name, max(versions, key=_version_key))]

    def list(self) -> list[tuple[str, str]]:
        return sorted(self._prompts.keys())

    def _load_all(self, directory: Path) -> None:
        for file_path in sorted(directory.glob("*.yaml")):
            prompt = self._load_prompt(file_path)
            key = (prompt.name, prompt.version)
            if key in self._prompts:
                raise ValueError(
                    f"Duplicate prompt '{prompt.name}' version '{prompt.version}' "
                    f"in {file_path}"
                )
            self._prompts[key] = prompt
            logger.debug(
                "Loaded prompt: %s v%s from %s", prompt.name, prompt.version, file_path
            )

    def _load_prompt(self, file_path: Path) -> Prompt:
        with open(file_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return Prompt(**data)
