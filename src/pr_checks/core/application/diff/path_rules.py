"""Path heuristics recognising test source files."""

import re
from collections.abc import Callable
from pathlib import PurePosixPath

PathRule = Callable[[str], bool]

_ANDROID_TEST_PATH = re.compile(r"/(test|androidTest).*\.(java|kt)$")
_IOS_TEST_FILE_NAME = re.compile(r"\w+Tests?\.(swift|m)$")


def is_android_test_file(path: str) -> bool:
    return _ANDROID_TEST_PATH.search(path) is not None


def is_ios_test_file(path: str) -> bool:
    return _IOS_TEST_FILE_NAME.search(PurePosixPath(path).name) is not None


ANDROID_TEST_FILE_RULES: tuple[PathRule, ...] = (is_android_test_file,)
DEFAULT_TEST_FILE_RULES: tuple[PathRule, ...] = (is_android_test_file, is_ios_test_file)


def is_test_file(path: str, rules: tuple[PathRule, ...] = DEFAULT_TEST_FILE_RULES) -> bool:
    return any(rule(path) for rule in rules)
