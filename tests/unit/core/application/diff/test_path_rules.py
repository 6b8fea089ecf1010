import pytest

from pr_checks.core.application.diff import (
    ANDROID_TEST_FILE_RULES,
    is_android_test_file,
    is_ios_test_file,
    is_test_file,
)


class TestAndroidTestFiles:
    @pytest.mark.parametrize(
        "path",
        [
            "app/src/test/java/org/example/FooTest.kt",
            "app/src/androidTest/java/org/example/FooScreenTest.java",
        ],
    )
    def test_recognises_test_sources(self, path: str) -> None:
        assert is_android_test_file(path)

    @pytest.mark.parametrize(
        "path",
        ["app/src/main/java/org/example/Foo.kt", "app/src/test/resources/fixture.json", "FooTest.java"],
    )
    def test_rejects_other_paths(self, path: str) -> None:
        assert not is_android_test_file(path)


class TestIosTestFiles:
    @pytest.mark.parametrize("path", ["AppTests/FooTests.swift", "AppTests/BarTest.m"])
    def test_recognises_test_sources(self, path: str) -> None:
        assert is_ios_test_file(path)

    @pytest.mark.parametrize("path", ["App/Foo.swift", "AppTests/Helpers.swift", "AppTests/FooTests.kt"])
    def test_rejects_other_paths(self, path: str) -> None:
        assert not is_ios_test_file(path)


def test_default_rules_combine_both_platforms() -> None:
    assert is_test_file("AppTests/FooTests.swift")
    assert is_test_file("app/src/test/java/FooTest.kt")


def test_android_only_rules_ignore_ios_tests() -> None:
    assert not is_test_file("AppTests/FooTests.swift", ANDROID_TEST_FILE_RULES)
