from rawsync.services.pipeline.matcher import RawJpegMatcher
from rawsync.services.pipeline.models import MatchStatus
from tests.helpers import touch


def test_raw_with_sibling_jpeg_is_matched(tmp_path):
    raw = touch(tmp_path / "shoot" / "raw" / "IMG_1.NEF")
    jpeg = touch(tmp_path / "shoot" / "IMG_1.JPG")

    result = RawJpegMatcher().match(raw)

    assert result.status is MatchStatus.MATCHED
    assert result.jpeg_path == jpeg


def test_raw_without_jpeg_is_unmatched(tmp_path):
    raw = touch(tmp_path / "shoot" / "raw" / "IMG_2.NEF")
    touch(tmp_path / "shoot" / "raw" / "IMG_2.JPG")

    result = RawJpegMatcher().match(raw)

    assert result.status is MatchStatus.UNMATCHED
    assert result.jpeg_path is None
    assert result.candidates == [tmp_path / "shoot" / "IMG_2.JPG"]


def test_raw_outside_raw_directory_is_not_considered(tmp_path):
    raw = touch(tmp_path / "shoot" / "IMG_3.NEF")

    result = RawJpegMatcher().match(raw)

    assert result.status is MatchStatus.NOT_IN_RAW_DIR
    assert result.candidates == []


def test_raw_directory_name_is_case_insensitive(tmp_path):
    raw = touch(tmp_path / "shoot" / "RAW" / "IMG_4.NEF")
    touch(tmp_path / "shoot" / "IMG_4.JPG")

    assert RawJpegMatcher().match(raw).status is MatchStatus.MATCHED


def test_jpeg_directory_must_hold_a_file(tmp_path):
    raw = touch(tmp_path / "shoot" / "raw" / "IMG_5.NEF")
    (tmp_path / "shoot" / "IMG_5.JPG").mkdir()

    assert RawJpegMatcher().match(raw).status is MatchStatus.UNMATCHED


def test_custom_directory_name_and_extensions(tmp_path):
    raw = touch(tmp_path / "shoot" / "negatives" / "IMG_6.NEF")
    jpeg = touch(tmp_path / "shoot" / "IMG_6.jpeg")
    matcher = RawJpegMatcher(raw_dir_name="Negatives", jpeg_extensions=(".JPG", ".jpeg"))

    result = matcher.match(raw)

    assert result.status is MatchStatus.MATCHED
    assert result.jpeg_path == jpeg
