from pldf.infrastructure.packaging.release_packager import FsReleasePackager

__all__ = ["FsReleasePackager"]
