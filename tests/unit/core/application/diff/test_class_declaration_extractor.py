"""Unit tests: regex class declaration heuristics."""

from pr_checks.core.application.diff import (
    ANY_CLASS_DETECTOR,
    NON_PRIVATE_CLASS_DETECTOR,
    derive_supertype,
    extract_class_declarations,
    extract_class_names,
)
from pr_checks.core.domain.diff import ClassDeclarationMatch


class TestExtractClassDeclarations:
    def test_java_supertype_from_extends(self) -> None:
        source = "public class FooPresenter extends BasePresenter implements Listener {\n}"

        result = extract_class_declarations(source, "app/FooPresenter.java")

        assert result == [ClassDeclarationMatch("FooPresenter", "BasePresenter")]

    def test_kotlin_supertype_uses_last_colon_match(self) -> None:
        source = "class FooViewModel(val id: Int) : BaseViewModel() {\n}"

        result = extract_class_declarations(source, "app/FooViewModel.kt")

        assert result == [ClassDeclarationMatch("FooViewModel", "BaseViewModel")]

    def test_declaration_may_span_lines(self) -> None:
        source = "class Repository(\n    private val api: Api\n) : DataSource {\n}"

        result = extract_class_declarations(source, "Repository.kt")

        assert result == [ClassDeclarationMatch("Repository", "DataSource")]

    def test_private_class_is_not_picked_up(self) -> None:
        source = "private class Hidden {\n}\nclass Shown {\n}"

        result = extract_class_declarations(source, "Shown.kt", NON_PRIVATE_CLASS_DETECTOR)

        assert [match.class_name for match in result] == ["Shown"]

    def test_allowed_modifiers_and_indentation(self) -> None:
        source = "    public static class Nested {\n    }\nabstract class Base {\n}"

        result = extract_class_declarations(source, "Outer.java")

        assert [match.class_name for match in result] == ["Nested", "Base"]

    def test_kotlin_modifiers_before_class(self) -> None:
        source = (
            "open class Polygon(sides: Int): Shape {\n}\n"
            "data class Point(val x: Int) {\n}\n"
            "sealed class Result {\n}\n"
            "enum class Color {\n}\n"
            "internal open class Cache {\n}\n"
        )

        result = extract_class_declarations(source, "Shapes.kt")

        assert [match.class_name for match in result] == ["Polygon", "Point", "Result", "Color", "Cache"]
        assert result[0].supertype == "Shape"

    def test_annotations_before_class(self) -> None:
        source = '@Keep class Kept {\n}\n@Suppress("unused") internal class Quiet {\n}'

        result = extract_class_declarations(source, "Kept.kt")

        assert [match.class_name for match in result] == ["Kept", "Quiet"]

    def test_annotation_lines_above_java_class(self) -> None:
        source = (
            "@InstallIn(SingletonComponent.class)\n"
            "@Module(includes = AndroidInjectionModule.class)\n"
            "public class MyModule {\n}"
        )

        result = extract_class_declarations(source, "MyModule.java")

        assert result == [ClassDeclarationMatch("MyModule", None)]

    def test_private_with_other_modifiers_is_not_picked_up(self) -> None:
        source = "private data class Hidden(val id: Int) {\n}\n@Keep private class AlsoHidden {\n}"

        assert extract_class_declarations(source, "Hidden.kt") == []

    def test_constructor_on_following_line(self) -> None:
        source = (
            "@Feature(BLOGGING_PROMPTS_REMOTE_FIELD, true)\n"
            "class BloggingPromptsFeatureConfig\n"
            "@Inject constructor(appConfig: AppConfig) : FeatureConfig(\n"
            "    appConfig,\n"
            "    BuildConfig.BLOGGING_PROMPTS\n"
            ") {\n"
            "    companion object {\n"
            "    }\n"
            "}"
        )

        result = extract_class_declarations(source, "BloggingPromptsFeatureConfig.kt")

        assert result == [ClassDeclarationMatch("BloggingPromptsFeatureConfig", "FeatureConfig")]

    def test_no_supertype_gives_none(self) -> None:
        assert extract_class_declarations("class Plain {}", "Plain.swift") == [
            ClassDeclarationMatch("Plain", None)
        ]

    def test_requires_brace_and_capitalised_name(self) -> None:
        assert extract_class_declarations("class Foo", "Foo.kt") == []
        assert extract_class_declarations("class foo {", "foo.kt") == []


class TestExtractClassNames:
    def test_any_detector_includes_private_classes(self) -> None:
        source = "private class Hidden {\n}\ninternal class Other {"

        assert extract_class_names(source, ANY_CLASS_DETECTOR) == ["Hidden", "Other"]

    def test_empty_source(self) -> None:
        assert extract_class_names("") == []


class TestDeriveSupertype:
    def test_empty_tail(self) -> None:
        assert derive_supertype("", "Foo.kt") is None

    def test_java_ignores_colon_syntax(self) -> None:
        assert derive_supertype(": Base", "Foo.java") is None
