"""Diagnostics reported back to the plugin host."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional


class DiagnosticSeverity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    """A single message attached to a host operation."""

    severity: DiagnosticSeverity
    summary: str
    detail: str = ""
    # Attribute path such as ("code", "package_type"); None for the whole operation
    attribute: Optional[tuple[str, ...]] = None

    def to_dict(self) -> dict:
        data = {"severity": self.severity.value, "summary": self.summary, "detail": self.detail}
        if self.attribute:
            data["attribute"] = ".".join(self.attribute)
        return data


@dataclass
class Diagnostics:
    """Ordered collection of diagnostics for one operation."""

    items: list[Diagnostic] = field(default_factory=list)

    def add_error(self, summary: str, detail: str = "") -> None:
        self.items.append(Diagnostic(DiagnosticSeverity.ERROR, summary, detail))

    def add_attribute_error(self, attribute: tuple[str, ...], summary: str, detail: str = "") -> None:
        self.items.append(Diagnostic(DiagnosticSeverity.ERROR, summary, detail, tuple(attribute)))

    def has_error(self) -> bool:
        return any(d.severity is DiagnosticSeverity.ERROR for d in self.items)

    def errors(self) -> list[Diagnostic]:
        return [d for d in self.items if d.severity is DiagnosticSeverity.ERROR]

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
