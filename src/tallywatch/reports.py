"""Generador de reportes de texto para auditorías de región.

Consume únicamente datos estructurados (``RegionAudit``); no imprime nada.

English:
    Text report generator for region audits. Consumes structured data only
    (``RegionAudit``) and returns strings; printing is the caller's job.
"""

from __future__ import annotations

from typing import List

from tallywatch.core.models import Candidate, ComparisonRecord
from tallywatch.pipeline import RegionAudit

PRINTING_SPACER = "-" * 42


def _lead_statement(record: ComparisonRecord) -> str:
    if record.lead_switched is None:
        return "The lead did not switch"
    return f"The lead switched in {record.lead_switched.display_name}'s favor"


def _format_number(value: float) -> str:
    rounded = round(float(value), 2)
    if rounded.is_integer():
        return str(int(rounded))
    return f"{rounded:.2f}"


class ReportFormatter:
    """Arma las secciones del reporte de una región.

    English: Builds the report sections for one region audit.
    """

    def __init__(self, audit: RegionAudit) -> None:
        self.audit = audit

    def _section(self, title: str, body: List[str], closing: str) -> List[str]:
        return [PRINTING_SPACER, title, PRINTING_SPACER, *body, closing, PRINTING_SPACER, "", ""]

    def _state_total_line(self) -> str:
        return f"TOTAL DROP FOR STATE WAS {self.audit.report.total_vote_count_drop}"

    def lead_switch_section(self) -> List[str]:
        body: List[str] = []
        for record in self.audit.report.lead_switch_events:
            if record.amount_dropped == 0:
                dropped = "did not drop"
            else:
                dropped = f"dropped by {record.amount_dropped}"
            body.extend(
                [
                    f"{_lead_statement(record)} at {record.current.timestamp}",
                    f"Total vote counts {dropped}",
                    "",
                ]
            )
        return self._section(
            f"PRINTING TIMES LEAD SWITCHED IN {self.audit.region}",
            body,
            self._state_total_line(),
        )

    def total_drop_section(self) -> List[str]:
        body: List[str] = []
        for record in self.audit.report.vote_drop_events:
            body.extend(
                [
                    f"total count dropped by {record.amount_dropped}",
                    f"between {record.previous.timestamp} and {record.current.timestamp}",
                    _lead_statement(record),
                    "",
                ]
            )
        return self._section(
            f"PRINTING TIMES TOTAL COUNT DROPPED IN {self.audit.region}",
            body,
            self._state_total_line(),
        )

    def candidate_drop_section(self, candidate: Candidate) -> List[str]:
        """Sección por candidato; solo lista caídas negativas.

        English:
            Per-candidate section. Only records where the candidate's implied
            total fell are listed, and the closing total sums those drops
            across every record, not just the total-drop intervals.
        """
        body: List[str] = []
        total_drop = 0.0
        for record in self.audit.records:
            drop = record.drop_for(candidate)
            if drop >= 0:
                continue
            total_drop += drop
            body.extend(
                [
                    f"AT {record.current.timestamp}, {candidate.display_name}'s total dropped by {_format_number(drop)}",
                    f"Total drop for timeframe was {record.amount_dropped}",
                    _lead_statement(record),
                    "",
                ]
            )
        return self._section(
            f"PRINTING TIMES {candidate.display_name}'s TOTAL DROPPED IN {self.audit.region}",
            body,
            f"TOTAL DROP FOR {candidate.value.upper()} was {_format_number(total_drop)}",
        )

    def summary(self) -> List[str]:
        report = self.audit.report
        lines = [
            f"REGION: {self.audit.region}",
            f"WINNER: {report.winner.display_name}",
            f"CURRENT TOTAL VOTES: {self.audit.current_total_votes}",
            f"TOTAL VOTE COUNT DROP: {report.total_vote_count_drop}",
            f"LEAD SWITCHES: {len(report.lead_switch_events)}",
            f"VOTE DROP EVENTS: {len(report.vote_drop_events)}",
        ]
        for candidate in Candidate:
            lines.append(
                f"{candidate.value.upper()} DROP DURING TOTAL DROPS: "
                f"{_format_number(report.candidate_vote_drop_total[candidate])}"
            )
        return lines

    def render(self) -> str:
        lines = [f"EVALUATING {self.audit.region}", ""]
        lines.extend(self.lead_switch_section())
        lines.extend(self.total_drop_section())
        for candidate in Candidate:
            lines.extend(self.candidate_drop_section(candidate))
        return "\n".join(lines)


def render_report(audit: RegionAudit) -> str:
    """/** Reporte de texto completo. / Full text report. **/"""
    return ReportFormatter(audit).render()
