# Copyright 2026 JDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""End-to-end tests: Java source text and files to declarations."""

import logging
import textwrap
from pathlib import Path

import pytest

from jdoc.config import ParserConfig
from jdoc.model.declarations import ClassDef, EnumDef, EnumField, InterfaceDef, Member
from jdoc.model.docs import ExceptionDoc, Param
from jdoc.parser import SourceFileError, parse, parse_file

# ###############
# Test Helpers
# ###############


def _parse(source: str) -> ClassDef | InterfaceDef | EnumDef:
    return parse(textwrap.dedent(source))


_ADD_SOURCE = """\
package com.example;
/**
 * Adds two numbers.
 * @param a first value
 * @param b second value
 * @return the sum
 */
public int add(int a, int b) {
    return a + b;
}
"""


# ###############
# Methods and Javadoc
# ###############


class TestDocumentedMethod:
    def test_package_and_method(self) -> None:
        decl = parse(_ADD_SOURCE)
        assert isinstance(decl, ClassDef)
        assert decl.package_name == "com.example"
        assert [method.name for method in decl.methods] == ["add"]

    def test_parameters_carry_types_and_descriptions(self) -> None:
        method = parse(_ADD_SOURCE).methods[0]
        assert method.access == "public"
        assert method.parameters == [
            Param(type="int", name="a", description="first value"),
            Param(type="int", name="b", description="second value"),
        ]
        assert method.description == "Adds two numbers."

    def test_documented_return_text_replaces_return_type(self) -> None:
        assert parse(_ADD_SOURCE).methods[0].return_type == "the sum"

    def test_method_position(self) -> None:
        method = parse(_ADD_SOURCE).methods[0]
        assert method.line == 8
        assert method.signature == "public int add(int a, int b) {"

    def test_body_statements_are_not_declarations(self) -> None:
        decl = parse(_ADD_SOURCE)
        assert decl.variables == []

    def test_body_never_leaks_into_the_record(self) -> None:
        decl = _parse(
            """\
            public class Calc {
                public int twice(int value) {
                    int secret = value * 2;
                    return secret;
                }
            }
            """
        )
        assert decl.methods[0].parameters == [Param(type="int", name="value")]
        assert "secret" not in decl.model_dump_json()

    def test_locals_of_a_file_level_body_are_not_fields(self) -> None:
        decl = _parse(
            """\
            public int add(int a, int b) {
                int c = a + b;
                return c;
            }
            """
        )
        assert [method.name for method in decl.methods] == ["add"]
        assert decl.variables == []

    def test_see_reference(self) -> None:
        decl = _parse(
            """\
            public class A {
                /** Sizes. @see Collection */
                int size();
            }
            """
        )
        assert decl.methods[0].see == "Collection"
        assert decl.methods[0].description == "Sizes."

    def test_doc_is_discarded_after_each_statement(self) -> None:
        decl = _parse(
            """\
            public class A {
                /** Count. @return never */
                int count;
                int size() {
                }
            }
            """
        )
        assert decl.methods[0].return_type == "int"
        assert decl.methods[0].description == ""

    def test_inline_tags_in_descriptions(self) -> None:
        decl = _parse(
            """\
            /** Returns {@code null} when empty. See {@link Other} for more. */
            public class A {
            }
            """
        )
        assert decl.description == "Returns null when empty. See"
        assert decl.see == "Other for more."

    def test_constructor(self) -> None:
        decl = _parse(
            """\
            public class Point {
                /**
                 * Creates a point.
                 * @param x horizontal
                 */
                public Point(int x) {
                }
            }
            """
        )
        constructor = decl.methods[0]
        assert constructor.name == "Point"
        assert constructor.return_type == "Point"
        assert constructor.parameters == [Param(type="int", name="x", description="horizontal")]


# ###############
# Fields
# ###############


class TestFields:
    def test_constant_field(self) -> None:
        decl = _parse(
            """\
            public class Config {
                private static final int MAX = 10;
            }
            """
        )
        assert decl.name == "Config"
        assert decl.variables == [
            Member(
                type="int",
                name="MAX",
                access="private",
                modifiers=["static", "final"],
                line=2,
                signature="private static final int MAX = 10;",
            )
        ]

    def test_string_initializer_with_url(self) -> None:
        decl = _parse(
            """\
            public class Links {
                String url = "http://example.com";
                int y;
            }
            """
        )
        assert [(member.type, member.name) for member in decl.variables] == [("String", "url"), ("int", "y")]

    def test_generic_types(self) -> None:
        decl = _parse(
            """\
            public class Registry {
                private Map<String, Integer> counts;
                public void put(Map<String, Integer> m, int x) {
                }
            }
            """
        )
        assert [(member.type, member.name) for member in decl.variables] == [("Map<String, Integer>", "counts")]
        assert decl.methods[0].parameters == [
            Param(type="Map<String, Integer>", name="m"),
            Param(type="int", name="x"),
        ]

    def test_line_comments_end_at_the_newline(self) -> None:
        decl = _parse(
            """\
            public class A {
                // helper for x; see http://example.com
                int x;
                int z; // trailing
                int w;
            }
            """
        )
        assert [member.name for member in decl.variables] == ["x", "z", "w"]


# ###############
# Enums
# ###############


class TestEnums:
    def test_constants_without_terminator(self) -> None:
        decl = _parse(
            """\
            public enum Color {
                RED, GREEN, BLUE
            }
            """
        )
        assert isinstance(decl, EnumDef)
        assert decl.fields == [
            EnumField(name="RED", value="0"),
            EnumField(name="GREEN", value="1"),
            EnumField(name="BLUE", value="2"),
        ]

    def test_constants_with_arguments_and_members(self) -> None:
        decl = _parse(
            """\
            public enum Planet {
                MERCURY(1), VENUS(2);
                private final int order;
                Planet(int order) {
                    this.order = order;
                }
                public int getOrder() {
                    return order;
                }
            }
            """
        )
        assert isinstance(decl, EnumDef)
        assert [field.name for field in decl.fields] == ["MERCURY", "VENUS"]
        assert [(member.type, member.name) for member in decl.variables] == [("int", "order")]
        assert [method.name for method in decl.methods] == ["Planet", "getOrder"]

    def test_documented_constants(self) -> None:
        decl = _parse(
            """\
            enum Level {
                /** Low. */
                LOW,
                /** High. */
                HIGH
            }
            """
        )
        assert decl.fields == [EnumField(name="LOW", value="0"), EnumField(name="HIGH", value="1")]

    def test_empty_constant_list(self) -> None:
        decl = _parse(
            """\
            enum Empty {
                ;
                int size;
            }
            """
        )
        assert decl.fields == []
        assert [member.name for member in decl.variables] == ["size"]

    def test_enum_implements(self) -> None:
        decl = _parse(
            """\
            public enum Mode implements Runnable {
                ON, OFF;
            }
            """
        )
        assert decl.interfaces == ["Runnable"]
        assert len(decl.fields) == 2


# ###############
# Interfaces
# ###############

_READER_SOURCE = """\
package com.example.api;

import java.io.IOException;
import java.util.List;

/**
 * Reads records.
 * @author Jane
 * @version 2.0
 */
public interface Reader extends AutoCloseable, Iterable {
    int LIMIT = 100;

    /**
     * Reads the next batch.
     * @param size maximum number of records
     * @return the records read
     * @throws IOException if the source fails
     */
    List<String> read(int size) throws IOException;

    void close();

    default void log(String msg) {
    }
}
"""


class TestInterface:
    def test_header(self) -> None:
        decl = parse(_READER_SOURCE)
        assert isinstance(decl, InterfaceDef)
        assert decl.name == "Reader"
        assert decl.package_name == "com.example.api"
        assert decl.dependencies == ["java.io.IOException", "java.util.List"]
        assert decl.parents == ["AutoCloseable", "Iterable"]
        assert decl.access == "public"
        assert decl.description == "Reads records."
        assert decl.author == "Jane"
        assert decl.version == "2.0"
        assert decl.signature == "public interface Reader extends AutoCloseable, Iterable {"

    def test_constants_are_fields(self) -> None:
        decl = parse(_READER_SOURCE)
        assert [(member.type, member.name) for member in decl.variables] == [("int", "LIMIT")]

    def test_abstract_methods(self) -> None:
        decl = parse(_READER_SOURCE)
        assert [method.name for method in decl.methods] == ["read", "close", "log"]

        read = decl.methods[0]
        assert read.return_type == "the records read"
        assert read.parameters == [Param(type="int", name="size", description="maximum number of records")]
        assert read.exceptions == [ExceptionDoc(type="IOException", description="if the source fails")]
        assert read.description == "Reads the next batch."

        close = decl.methods[1]
        assert close.return_type == "void"
        assert close.description == ""


# ###############
# Classes
# ###############

_COUNTER_SOURCE = """\
/*
 * Copyright 2026 Example Corp.
 */
package com.example;

import java.util.Map;
import static java.lang.Math.max;

/**
 * Keeps a running total.
 * @deprecated use Accumulator
 */
@Deprecated
@SuppressWarnings("unchecked")
public abstract class Counter<T> extends Base implements Runnable, Cloneable {
    private int count;
    protected transient String label = "x";

    @Override
    public void run() {
        count++;
        if (count > 10) {
            reset();
        }
    }

    public abstract int total();

    public static class Inner {
        int hidden;
    }
}
"""


class TestClass:
    def test_header(self) -> None:
        decl = parse(_COUNTER_SOURCE)
        assert isinstance(decl, ClassDef)
        assert decl.name == "Counter"
        assert decl.access == "public"
        assert decl.modifiers == ["abstract"]
        assert decl.parent == "Base"
        assert decl.interfaces == ["Runnable", "Cloneable"]
        assert decl.description == "Keeps a running total."
        assert decl.deprecated == "use Accumulator"
        assert decl.signature == "public abstract class Counter<T> extends Base implements Runnable, Cloneable {"

    def test_license_and_imports(self) -> None:
        decl = parse(_COUNTER_SOURCE)
        assert decl.license == "Copyright 2026 Example Corp."
        assert decl.dependencies == ["java.util.Map", "java.lang.Math.max"]

    def test_members(self) -> None:
        decl = parse(_COUNTER_SOURCE)
        assert [(member.type, member.name, member.access) for member in decl.variables] == [
            ("int", "count", "private"),
            ("String", "label", "protected"),
        ]

    def test_methods(self) -> None:
        decl = parse(_COUNTER_SOURCE)
        assert [method.name for method in decl.methods] == ["run", "total"]
        assert decl.methods[1].modifiers == ["abstract"]

    def test_nested_type_is_reported_and_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            decl = parse(_COUNTER_SOURCE)
        assert "Nested type declarations are not supported" in caplog.text
        assert "hidden" not in decl.model_dump_json()
        assert decl.name == "Counter"

    def test_nested_annotation_arguments(self) -> None:
        decl = _parse(
            """\
            class A {
                @Foo(bar = @Baz(1))
                int x;
            }
            """
        )
        assert [(member.type, member.name) for member in decl.variables] == [("int", "x")]


class TestCommentsOnly:
    def test_no_type_declaration(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            decl = _parse(
                """\
                // nothing here
                /* a class comment: class Foo { } */
                /** Doc about interface Bar; */
                """
            )
        assert isinstance(decl, ClassDef)
        assert decl.name == ""
        assert decl.methods == []
        assert decl.variables == []
        assert "Java file type not supported" in caplog.text


# ###############
# Files
# ###############


class TestParseFile:
    def test_reads_and_parses(self, tmp_path: Path) -> None:
        path = tmp_path / "Adder.java"
        path.write_text(_ADD_SOURCE, encoding="utf-8")
        assert parse_file(path) == parse(_ADD_SOURCE)

    def test_lint_flag_is_accepted(self, tmp_path: Path) -> None:
        path = tmp_path / "Adder.java"
        path.write_text(_ADD_SOURCE, encoding="utf-8")
        assert parse_file(path, lint=True) == parse(_ADD_SOURCE)

    def test_missing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "Missing.java"
        with pytest.raises(SourceFileError, match="not found") as exc_info:
            parse_file(path)
        assert exc_info.value.path == path

    def test_undecodable_file(self, tmp_path: Path) -> None:
        path = tmp_path / "Latin.java"
        path.write_bytes("/** Café. */\nclass A {\n}\n".encode("latin-1"))
        with pytest.raises(SourceFileError, match="Cannot read source file"):
            parse_file(path)

    def test_configured_encoding(self, tmp_path: Path) -> None:
        path = tmp_path / "Latin.java"
        path.write_bytes("/** Café. */\nclass A {\n}\n".encode("latin-1"))
        decl = parse_file(path, config=ParserConfig(encoding="latin-1"))
        assert decl.description == "Café."

    def test_unknown_encoding(self, tmp_path: Path) -> None:
        path = tmp_path / "A.java"
        path.write_text("class A {}", encoding="utf-8")
        with pytest.raises(SourceFileError):
            parse_file(path, config=ParserConfig(encoding="no-such-codec"))

    def test_directory_is_not_readable(self, tmp_path: Path) -> None:
        with pytest.raises(SourceFileError):
            parse_file(tmp_path)

    def test_configured_ignored_keywords(self, tmp_path: Path) -> None:
        path = tmp_path / "Service.java"
        path.write_text(
            textwrap.dedent(
                """\
                public class Service {
                    @Qualifier("main") private Repo repo;
                }
                """
            ),
            encoding="utf-8",
        )
        decl = parse_file(path, config=ParserConfig(ignored_keywords=["@Qualifier"]))
        assert decl.variables == [
            Member(
                type="Repo",
                name="repo",
                access="private",
                line=2,
                signature='@Qualifier("main") private Repo repo;',
            )
        ]
