from pathlib import Path

import pytest

from rer.rename import CaptureError, Clarity, Encode, Source, build_new_name, propose_rename

EP_ONLY = r"E(?P<ep>\d+)"


def test_default_substitution_example(make_pipeline):
    _, matcher, formatter = make_pipeline(
        regex=EP_ONLY,
        name="Show",
        year=2024,
        season=2,
        source=Source.HDTV,
        clarity=Clarity.C4K,
        encode=Encode.HEVC,
    )
    target = propose_rename(Path("/media/show.E05.mkv"), matcher, formatter)
    assert target == Path("/media/Show.2024.S2E5.HDTV.4k.HEVC.mkv")


def test_target_stays_in_source_directory(make_pipeline):
    _, matcher, formatter = make_pipeline(regex=EP_ONLY, name="Show")
    target = propose_rename(Path("/a/b/c/Show E01.avi"), matcher, formatter)
    assert target.parent == Path("/a/b/c")


def test_only_entry_name_is_matched(make_pipeline):
    _, matcher, formatter = make_pipeline(regex=EP_ONLY)
    assert propose_rename(Path("/shows/E12/readme.txt"), matcher, formatter) is None


def test_missing_extension_falls_back_to_mp4(make_pipeline):
    _, matcher, formatter = make_pipeline(regex=EP_ONLY, name="Show")
    target = propose_rename(Path("/media/Show E03"), matcher, formatter)
    assert target.name == "Show.2023.S1E3.WEB_DL.1080p.H264.mp4"


def test_custom_default_extension(make_pipeline):
    _, matcher, formatter = make_pipeline(regex=EP_ONLY, name="Show")
    target = propose_rename(Path("Show E03"), matcher, formatter, default_extension="mkv")
    assert target.name.endswith(".mkv")


def test_last_extension_is_kept(make_pipeline):
    _, matcher, formatter = make_pipeline(regex=EP_ONLY, name="Show")
    target = propose_rename(Path("Show E03.part.rmvb"), matcher, formatter)
    assert target.name == "Show.2023.S1E3.WEB_DL.1080p.H264.rmvb"


def test_no_match_returns_none(make_pipeline):
    _, matcher, formatter = make_pipeline(regex=EP_ONLY)
    assert propose_rename(Path("notes.txt"), matcher, formatter) is None


def test_capture_error_propagates(make_pipeline):
    _, matcher, formatter = make_pipeline(regex=r"E(?P<ep>\w+)")
    with pytest.raises(CaptureError):
        propose_rename(Path("Show Exy.mkv"), matcher, formatter)


def test_build_new_name(make_pipeline):
    config, matcher, formatter = make_pipeline(regex=EP_ONLY, name="Show", pad_width=2)
    resource = matcher.parse("E7")
    assert build_new_name(resource, "mkv", formatter) == "Show.2023.S01E07.WEB_DL.1080p.H264.mkv"
