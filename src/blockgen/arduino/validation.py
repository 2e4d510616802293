"""Pin usage findings collected while generating a sketch."""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Literal

ValidationMode = Literal["warn", "strict"]
FindingSeverity = Literal["error", "warning"]

PIN_CONFLICT = "PIN_CONFLICT"
UNKNOWN_PIN = "UNKNOWN_PIN"


@dataclass(frozen=True)
class PinFinding:
    code: str
    severity: FindingSeverity
    message: str
    location: str
    suggestion: str | None = None


@dataclass(frozen=True)
class PinReport:
    errors: tuple[PinFinding, ...] = ()
    warnings: tuple[PinFinding, ...] = ()

    def summary(self) -> str:
        parts: list[str] = []
        if self.errors:
            parts.append(f"{len(self.errors)} error(s)")
        if self.warnings:
            parts.append(f"{len(self.warnings)} warning(s)")
        if not parts:
            return "No findings."
        return ", ".join(parts) + "."


def _route_severity(mode: ValidationMode) -> FindingSeverity:
    if mode == "strict":
        return "error"
    return "warning"


def pin_conflict(
    pin: str,
    label: str,
    wanted: str,
    existing: str,
    location: str,
) -> PinFinding:
    return PinFinding(
        code=PIN_CONFLICT,
        severity="warning",
        message=f"Pin {pin} is needed for {label} as pin {wanted}. Already used as {existing}.",
        location=location,
        suggestion=f"Pick a pin other than {pin} or remove the block that uses it as {existing}.",
    )


def unknown_pin(pin: str, label: str, board_name: str, location: str) -> PinFinding:
    return PinFinding(
        code=UNKNOWN_PIN,
        severity="warning",
        message=f"Pin {pin} is needed for {label} but {board_name} has no such pin.",
        location=location,
        suggestion="Pick one of the board's digital pins.",
    )


def build_report(findings: list[PinFinding], mode: ValidationMode) -> PinReport:
    severity = _route_severity(mode)
    routed = tuple(
        PinFinding(f.code, severity, f.message, f.location, f.suggestion) for f in findings
    )
    if severity == "error":
        return PinReport(errors=routed)
    return PinReport(warnings=routed)


def _format_finding(finding: PinFinding) -> str:
    text = f"{finding.code} @ {finding.location}: {finding.message}"
    if finding.suggestion:
        text += f" {finding.suggestion}"
    return text


def raise_or_warn(report: PinReport) -> None:
    """Raise for errors, emit a ``UserWarning`` per warning."""
    if report.errors:
        lines = [f"{len(report.errors)} error(s)."]
        lines.extend(_format_finding(err) for err in report.errors)
        raise ValueError("\n".join(lines))
    for finding in report.warnings:
        warnings.warn(
            _format_finding(finding),
            UserWarning,
            stacklevel=3,
        )
