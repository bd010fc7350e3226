from loguru import logger

from pldf.application.dto.hint_query import HintQuery
from pldf.domain.entities.hint import ResolvedHint
from pldf.domain.ports.hint_source_port import HintSourcePort
from pldf.domain.services.hint_resolver import HintResolver
from pldf.domain.value_objects.stage import parse_stage


class GetHint:
    def __init__(self, source: HintSourcePort):
        self.source = source

    def execute(self, query: HintQuery) -> ResolvedHint:
        """Resolve a hint, loading fresh store snapshots for this call."""
        # Reject bad stages before touching the stores
        stage = parse_stage(query.stage)

        hint_store = self.source.load_hint_store()
        resource_store = self.source.load_resource_store()
        logger.debug(
            f"Loaded {len(hint_store.stages)} stages and "
            f"{len(resource_store.resources)} resources"
        )

        resolver = HintResolver(hint_store, resource_store)
        return resolver.resolve(stage, category=query.category, error_key=query.error_key)
