"""Plain-text technical report for an evaluated alloy design.

The layout is fixed: exporters and downstream tooling compare reports
byte for byte, so section order, labels and number formats must not drift.
"""
from datetime import datetime, timezone
from typing import List, Optional
import re

from .snapshot_service import PropertySnapshot


RULE = '═' * 60
REPORT_FOOTER = 'Generated by AI-Driven Alloy Redesign & Simulation Platform'
NO_WARNINGS = 'No stability warnings'
BULLET = '•'


def format_timestamp(generated_at: datetime) -> str:
    """UTC ISO-8601 timestamp with milliseconds, e.g. 2026-01-31T12:00:00.000Z."""
    if generated_at.tzinfo is not None:
        generated_at = generated_at.astimezone(timezone.utc)
    return generated_at.strftime('%Y-%m-%dT%H:%M:%S.') + f'{generated_at.microsecond // 1000:03d}Z'


def report_filename(name: str) -> str:
    """Download file name for a report, e.g. 'Custom_316L_TechReport.txt'."""
    return re.sub(r'\s+', '_', name) + '_TechReport.txt'


class TextReportGenerator:
    """Build the technical report for one snapshot.

    Parameters
    ----------
    name : str
        Alloy display name
    snapshot : PropertySnapshot
        Evaluated design
    """

    def __init__(self, name: str, snapshot: PropertySnapshot):
        self.name = name
        self.snap = snapshot

    def generate(self, generated_at: Optional[datetime] = None) -> str:
        """Render the report.

        Parameters
        ----------
        generated_at : datetime, optional
            Timestamp written in the header; defaults to now (UTC)

        Returns
        -------
        str
            Report text, newline separated, without a trailing newline
        """
        generated_at = generated_at or datetime.now(timezone.utc)
        lines = []
        lines += self._header(generated_at)
        lines += self._composition()
        lines += self._properties()
        lines += self._heat_treatment()
        lines += self._carbon_equivalent()
        lines += self._phase_stability()
        lines += self._sustainability()
        lines += self._insights()
        lines += [RULE, REPORT_FOOTER]
        return '\n'.join(lines)

    def _header(self, generated_at: datetime) -> List[str]:
        return [
            f'ALLOY TECHNICAL REPORT — {self.name}',
            f'Generated: {format_timestamp(generated_at)}',
            RULE,
            '',
        ]

    def _composition(self) -> List[str]:
        lines = ['COMPOSITION (wt%)']
        lines += [f'  {el:<4} : {wt:.3f}' for el, wt in self.snap.composition]
        lines.append('')
        return lines

    def _properties(self) -> List[str]:
        s = self.snap
        return [
            'CALCULATED PROPERTIES',
            f'  Yield Strength  : {s.yield_strength} MPa',
            f'  UTS             : {s.uts} MPa',
            f'  Hardness        : {s.hardness_hrc} HRC / {s.hardness_hv} HV',
            f'  Density         : {s.density:.3f} g/cm³',
            f'  Cost            : ${s.cost:.2f}/kg',
            '',
        ]

    def _heat_treatment(self) -> List[str]:
        s = self.snap
        return [
            'HEAT TREATMENT',
            f'  Ac1 : {s.ac1}°C',
            f'  Ac3 : {s.ac3}°C',
            f'  Ms  : {s.ms:.1f}°C',
            f'  Martensite Vf ({s.quench_medium} quench): {s.martensite_fraction * 100:.1f}%',
            '',
        ]

    def _carbon_equivalent(self) -> List[str]:
        s = self.snap
        return [
            "CARBON EQUIVALENT (Dearden & O'Neill)",
            f'  CE = {s.carbon_equivalent:.3f} — {s.hardenability.label}',
            '',
        ]

    def _phase_stability(self) -> List[str]:
        stability = self.snap.phase_stability
        lines = ['PHASE STABILITY', f'  {stability.phases}']
        if stability.warnings:
            lines += [f'  {w}' for w in stability.warnings]
        else:
            lines.append(f'  {NO_WARNINGS}')
        lines.append('')
        return lines

    def _sustainability(self) -> List[str]:
        return ['SUSTAINABILITY SCORE', f'  {self.snap.sustainability}/100', '']

    def _insights(self) -> List[str]:
        lines = ['MICROSTRUCTURE INSIGHTS']
        lines += [f'  {BULLET} {n}' for n in self.snap.narrative]
        lines.append('')
        return lines


def generate_text_report(name: str, snapshot: PropertySnapshot,
                         generated_at: Optional[datetime] = None) -> str:
    """Convenience wrapper around TextReportGenerator."""
    return TextReportGenerator(name, snapshot).generate(generated_at)
