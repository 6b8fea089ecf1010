from pr_checks.core.domain.diff.file_diff import FileDiff
from pr_checks.core.domain.diff.value_objects.change_type import ChangeType
from pr_checks.core.domain.diff.value_objects.class_declaration_match import ClassDeclarationMatch
from pr_checks.core.domain.diff.value_objects.file_change_kind import FileChangeKind

__all__ = ["ChangeType", "ClassDeclarationMatch", "FileChangeKind", "FileDiff"]
