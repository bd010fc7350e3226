from pydantic import BaseModel

from pldf.domain.ports.hint_source_port import HintSourcePort
from pldf.domain.value_objects.stage import Stage, parse_stage


class HintSummary(BaseModel, frozen=True):
    stage: str
    key: str
    message: str = ""


class ListHints:
    def __init__(self, source: HintSourcePort):
        self.source = source

    def execute(self, stage: str | None = None) -> list[HintSummary]:
        """List validation hints in declared order, optionally for one stage."""
        stages = [parse_stage(stage)] if stage else list(Stage)
        hint_store = self.source.load_hint_store()

        summaries: list[HintSummary] = []
        for s in stages:
            for key, entry in hint_store.stage_entries(s):
                summaries.append(HintSummary(stage=s.value, key=key, message=entry.message or ""))
        return summaries
