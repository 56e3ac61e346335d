import re

from rer.rename import (
    Clarity,
    Encode,
    FilenameMatcher,
    RenameConfig,
    Resource,
    ResourceFormatter,
    Source,
    format_resource,
)


def _resource(**overrides):
    values = dict(
        name="Show",
        year=2024,
        season=2,
        episode=5,
        source=Source.HDTV,
        clarity=Clarity.C4K,
        encode=Encode.HEVC,
    )
    values.update(overrides)
    return Resource(**values)


def test_unpadded_by_default():
    assert format_resource(_resource()) == "Show.2024.S2E5.HDTV.4k.HEVC"


def test_all_labels_render():
    resource = _resource(source=Source.WEB_DL, clarity=Clarity.C1080P, encode=Encode.H264)
    assert format_resource(resource) == "Show.2024.S2E5.WEB_DL.1080p.H264"


def test_empty_name_keeps_leading_dot():
    assert format_resource(_resource(name="")) == ".2024.S2E5.HDTV.4k.HEVC"


def test_pad_width_two():
    assert format_resource(_resource(), pad_width=2) == "Show.2024.S02E05.HDTV.4k.HEVC"


def test_pad_width_does_not_truncate():
    assert format_resource(_resource(episode=123), pad_width=2) == "Show.2024.S02E123.HDTV.4k.HEVC"


def test_formatter_uses_config_padding():
    formatter = ResourceFormatter(RenameConfig(regex="x", pad_width=3))
    assert formatter.format(_resource()) == "Show.2024.S002E005.HDTV.4k.HEVC"


def test_default_formatter_matches_resource_str():
    resource = _resource(season=11, episode=3)
    assert ResourceFormatter(RenameConfig(regex="x")).format(resource) == str(resource)


def test_formatted_name_parses_back():
    resource = _resource(season=7, episode=42)
    formatted = format_resource(resource)
    template = r"^[^.]*\.\d{4}\.S(?P<season>\d+)E(?P<ep>\d+)\.(WEB_DL|HDTV|DVD)\.(720p|1080p|2k|4k)\.(H264|H265|HEVC)$"
    assert re.fullmatch(template, formatted)

    reparsed = FilenameMatcher(RenameConfig(regex=template)).parse(formatted)
    assert (reparsed.season, reparsed.episode) == (7, 42)
