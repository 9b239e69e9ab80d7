import re

from pydantic import BaseModel

_PLACEHOLDER = re.compile(r"\{\{\s*(\w+)\s*\}\}")


class Prompt(BaseModel):
    name: str
    version: str
    description: str
    inputs: dict[str, str]
    system: str = ""
    template: str

    class Config:
        extra = "forbid"

    def render(self, **values: str) -> str:
        """Fill ``{{ input }}`` placeholders in the template.

        Raises:
            KeyError: If a declared input is not supplied.
        """
        missing = sorted(set(self.inputs) - set(values))
        if missing:
            raise KeyError(
                f"Prompt '{self.name}' version '{self.version}' missing inputs: "
                + ", ".join(missing)
            )
        return _PLACEHOLDER.sub(
            lambda m: str(values.get(m.group(1), m.group(0))), self.template
        )
