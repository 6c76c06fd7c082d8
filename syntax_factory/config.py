"""
Configuration for the factory generator.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        atomic_write: Whether to write through a temporary file and rename
        validate_before_write: Whether to check the generated text before replacing the target
    """

    atomic_write: bool = True
    validate_before_write: bool = False


@dataclass
class GeneratorConfig:
    """Configuration options for code generation."""

    # Module wrapping both generated sections
    module_name: str = "ts"

    # Names of the generated factory and visitor modules
    factory_module: str = "Factory"
    visitor_module: str = "Visitor"

    # Reference paths written in the file preamble
    references: list[str] = field(default_factory=lambda: ["parser.ts", "factory.ts"])

    # Extra comment line written after the auto-generated marker
    generation_comment: str = ""

    # File written next to the input schema
    output_filename: str = "factory.generated.ts"

    indent_unit: str = "    "
    newline: str = "\n"

    output: OutputConfig = field(default_factory=OutputConfig)

    @staticmethod
    def from_dict(d: dict) -> GeneratorConfig:
        """Create a config from a dictionary."""
        config = GeneratorConfig()
        for k, v in d.items():
            if k == "output" and isinstance(v, dict):
                config.output = OutputConfig(
                    atomic_write=v.get("atomic_write", True),
                    validate_before_write=v.get("validate_before_write", False),
                )
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "module_name": self.module_name,
            "factory_module": self.factory_module,
            "visitor_module": self.visitor_module,
            "references": self.references,
            "generation_comment": self.generation_comment,
            "output_filename": self.output_filename,
            "indent_unit": self.indent_unit,
            "newline": self.newline,
            "output": {
                "atomic_write": self.output.atomic_write,
                "validate_before_write": self.output.validate_before_write,
            },
        }
