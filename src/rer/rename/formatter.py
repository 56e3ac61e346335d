# python
"""
Builds the canonical base filename for a parsed Resource.

Output shape:

    "<name>.<year>.S<season>E<episode>.<source>.<clarity>.<encode>"

Notes:
- Enum fields are written with their labels (`WEB_DL`, `1080p`, `H264`, ...).
- Season and episode are unpadded by default (`S2E5`), which keeps names
  compatible with earlier runs. A `pad_width` of 2 gives the more common
  `S02E05`.
- No extension is added here; see `rer.rename.core.build_new_name`.

Example:
    format_resource(Resource("Show", 2024, 2, 5, Source.HDTV, Clarity.C4K, Encode.HEVC))
    -> "Show.2024.S2E5.HDTV.4k.HEVC"
"""
from rer.rename.models import RenameConfig, Resource


def format_resource(resource: Resource, pad_width: int = 0) -> str:
    """Render `resource` as a dotted base filename, zero-padding season/episode to `pad_width` digits."""
    season = f"{resource.season:0{pad_width}d}" if pad_width else str(resource.season)
    episode = f"{resource.episode:0{pad_width}d}" if pad_width else str(resource.episode)
    return (
        f"{resource.name}.{resource.year}.S{season}E{episode}."
        f"{resource.source}.{resource.clarity}.{resource.encode}"
    )


class ResourceFormatter:
    """Formats resources with the padding chosen for the run."""

    def __init__(self, config: RenameConfig):
        self.pad_width = config.pad_width

    def format(self, resource: Resource) -> str:
        return format_resource(resource, self.pad_width)
