from mediashelf.shared.utils.clock import next_version, now_ms
from mediashelf.shared.utils.images import build_image_url, build_profile_picture_url
from mediashelf.shared.utils.ratings import average_score
from mediashelf.shared.models import WorkType


BASE = "https://img.example.com"


class TestAverageScore:
    def test_empty(self):
        assert average_score([]) == (0, 0)

    def test_mean_of_three(self):
        assert average_score([4, 5, 3]) == (4.0, 3)

    def test_rounds_to_two_decimals(self):
        assert average_score([5, 4, 4]) == (4.33, 3)

    def test_rounds_half_up(self):
        # 33 / 8 = 4.125
        assert average_score([5, 5, 5, 5, 4, 4, 4, 1]) == (4.13, 8)

    def test_accepts_generator(self):
        assert average_score(score for score in (1, 2)) == (1.5, 2)


class TestNextVersion:
    def test_strictly_increases_from_future_value(self):
        future = now_ms() + 60_000
        assert next_version(future) == future + 1

    def test_uses_clock_when_ahead(self):
        assert next_version(1) >= now_ms() - 1000

    def test_none_current(self):
        assert next_version(None) > 0


class TestImageUrls:
    def test_placeholder_for_work_type(self):
        assert build_image_url(None, WorkType.MOVIE, base_url=BASE) == f"{BASE}/placeholders/movie-placeholder.jpg"

    def test_placeholder_for_hyphenated_type(self):
        assert (
            build_image_url("", "graphic-novel", base_url=BASE)
            == f"{BASE}/placeholders/graphic-novel-placeholder.jpg"
        )

    def test_default_cover_for_unknown_type(self):
        assert build_image_url("  ", "podcast", base_url=BASE) == f"{BASE}/default-cover.jpg"

    def test_absolute_url_unchanged(self):
        url = "https://cdn.example.org/cover.png"
        assert build_image_url(url, "book", base_url=BASE) == url

    def test_relative_path_joined(self):
        assert build_image_url("/covers/dune.jpg", "book", base_url=BASE + "/") == f"{BASE}/covers/dune.jpg"

    def test_default_profile_picture(self):
        assert build_profile_picture_url(None, base_url=BASE) == f"{BASE}/default-profile.jpg"

    def test_profile_picture_path(self):
        assert build_profile_picture_url("avatars/a.png", base_url=BASE) == f"{BASE}/avatars/a.png"
