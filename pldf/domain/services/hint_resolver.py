from loguru import logger

from pldf.domain.entities.hint import (
    HintEntry,
    HintStore,
    ResolvedHint,
    ResourceRecord,
    ResourceStore,
)
from pldf.domain.errors import HintNotFoundError
from pldf.domain.value_objects.hint_type import HintType
from pldf.domain.value_objects.stage import Stage, parse_stage


class HintResolver:
    """Select one hint for a stage using the fallback chain.

    Precedence (first match wins): exact error key, category substring
    (message pass, then key pass), first declared entry of the stage,
    general ``stuck`` hint. Nothing found raises HintNotFoundError.
    """

    def __init__(self, hint_store: HintStore, resource_store: ResourceStore):
        self.hint_store = hint_store
        self.resource_store = resource_store

    def resolve(
        self,
        stage: Stage | str,
        category: str | None = None,
        error_key: str | None = None,
    ) -> ResolvedHint:
        stage = parse_stage(stage)
        entries = self.hint_store.stage_entries(stage)

        found = self._select(entries, category, error_key)
        if found is not None:
            key, entry = found
            logger.debug(f"Resolved validation hint '{key}' for stage {stage.value}")
            return self._build(stage, category, HintType.VALIDATION, entry)

        general = self.hint_store.general_hint()
        if general is not None:
            logger.debug(f"Falling back to general hint for stage {stage.value}")
            return self._build(stage, category, HintType.GENERAL, general)

        raise HintNotFoundError(stage.value)

    def _select(
        self,
        entries: list[tuple[str, HintEntry]],
        category: str | None,
        error_key: str | None,
    ) -> tuple[str, HintEntry] | None:
        if error_key:
            for key, entry in entries:
                if key == error_key:
                    return key, entry

        if category:
            match = self.match_category(entries, category)
            if match is not None:
                return match

        return entries[0] if entries else None

    @staticmethod
    def match_category(
        entries: list[tuple[str, HintEntry]], category: str
    ) -> tuple[str, HintEntry] | None:
        """Find the first entry whose message, then whose key, contains category."""
        needle = category.lower()

        for key, entry in entries:
            if entry.message and needle in entry.message.lower():
                return key, entry

        for key, entry in entries:
            if needle in key.lower():
                return key, entry

        return None

    def resolve_resources(self, resource_ids: list[str]) -> list[ResourceRecord]:
        """Map ids to records in order; unknown ids are dropped, duplicates kept."""
        resolved: list[ResourceRecord] = []
        for resource_id in resource_ids:
            record = self.resource_store.get(resource_id)
            if record is None:
                logger.debug(f"Dropping unknown resource '{resource_id}'")
                continue
            resolved.append(record)
        return resolved

    def _build(
        self,
        stage: Stage,
        category: str | None,
        hint_type: HintType,
        entry: HintEntry,
    ) -> ResolvedHint:
        return ResolvedHint(
            stage=stage,
            category=category or "",
            hint_type=hint_type,
            message=entry.message or "",
            hint=entry.hint,
            resources=self.resolve_resources(entry.resources),
        )
