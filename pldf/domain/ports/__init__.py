from pldf.domain.ports.hint_source_port import HintSourcePort
from pldf.domain.ports.release_packager_port import ReleasePackagerPort

__all__ = [
    "HintSourcePort",
    "ReleasePackagerPort",
]
