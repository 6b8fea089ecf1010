from pr_checks.core.application.diff.changeset_queries import (
    DiffStats,
    added_and_modified_files,
    all_changed_files,
    count_changes,
    matching_lines_in_diff_files,
)
from pr_checks.core.application.diff.class_declaration_extractor import (
    ANY_CLASS_DETECTOR,
    NON_PRIVATE_CLASS_DETECTOR,
    derive_supertype,
    extract_class_declarations,
    extract_class_names,
)
from pr_checks.core.application.diff.diff_line_classifier import (
    added_lines,
    classify,
    patch_lines,
    removed_lines,
    select_lines,
)
from pr_checks.core.application.diff.missing_test_detector import (
    DEFAULT_CLASSES_EXCEPTIONS,
    DEFAULT_SUBCLASSES_EXCEPTIONS,
    MissingTestDetector,
)
from pr_checks.core.application.diff.path_rules import (
    ANDROID_TEST_FILE_RULES,
    DEFAULT_TEST_FILE_RULES,
    is_android_test_file,
    is_ios_test_file,
    is_test_file,
)

__all__ = [
    "ANDROID_TEST_FILE_RULES",
    "ANY_CLASS_DETECTOR",
    "DEFAULT_CLASSES_EXCEPTIONS",
    "DEFAULT_SUBCLASSES_EXCEPTIONS",
    "DEFAULT_TEST_FILE_RULES",
    "NON_PRIVATE_CLASS_DETECTOR",
    "DiffStats",
    "MissingTestDetector",
    "added_and_modified_files",
    "added_lines",
    "all_changed_files",
    "classify",
    "count_changes",
    "derive_supertype",
    "extract_class_declarations",
    "extract_class_names",
    "is_android_test_file",
    "is_ios_test_file",
    "is_test_file",
    "matching_lines_in_diff_files",
    "patch_lines",
    "removed_lines",
    "select_lines",
]
