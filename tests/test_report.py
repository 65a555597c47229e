"""Tests for diagnostic formatting."""

from pathlib import Path

from manifest_validator.exceptions import ManifestParseError, SchemaNotFound
from manifest_validator.models.schema_validator import ErrorType, SchemaIssue
from manifest_validator.report import ErrorReporter

MANIFEST = Path("/work/bucket/app.json")


def _issue(message, line=1, column=1, schema_id="#", error_type=ErrorType.REQUIRED, children=()):
    return SchemaIssue(
        message=message,
        line=line,
        column=column,
        schema_id=schema_id,
        error_type=error_type,
        children=children,
    )


def test_plain_diagnostic():
    reporter = ErrorReporter()

    diagnostics = reporter.report([_issue("'version' is a required property")], MANIFEST)

    assert diagnostics == [
        "  - Error: 'version' is a required property\n"
        "    Line: /work/bucket/app.json:1:1\n"
        "    Path: #/Required\n"
    ]


def test_ci_diagnostic():
    reporter = ErrorReporter(ci=True)

    diagnostics = reporter.report(
        [_issue("1 is not of type 'string'", 3, 14, "#/properties/version", ErrorType.TYPE)],
        MANIFEST,
    )

    assert diagnostics == [
        "  [*] Error: 1 is not of type 'string'\n"
        "    [^] Line: /work/bucket/app.json:3:14\n"
        "    [^] Path: #/properties/version/Type"
    ]


def test_children_follow_parent_with_deeper_indent():
    pattern = _issue("does not match", 2, 10, "#/properties/license/anyOf/0", ErrorType.PATTERN)
    wrong_type = _issue("is not an object", 2, 10, "#/properties/license/anyOf/1", ErrorType.TYPE)
    parent = _issue(
        "not valid under any of the given schemas",
        2,
        10,
        "#/properties/license",
        ErrorType.ANY_OF,
        children=(pattern, wrong_type),
    )
    sibling = _issue("'url' is a required property")

    diagnostics = ErrorReporter().report([parent, sibling], MANIFEST)

    assert [d.splitlines()[0] for d in diagnostics] == [
        "  - Error: not valid under any of the given schemas",
        "    - Error: does not match",
        "    - Error: is not an object",
        "  - Error: 'url' is a required property",
    ]
    assert diagnostics[1].splitlines()[2] == "      Path: #/properties/license/anyOf/0/Pattern"


def test_ci_children_indent():
    child = _issue("child", error_type=ErrorType.TYPE)
    parent = _issue("parent", error_type=ErrorType.ONE_OF, children=(child,))

    diagnostics = ErrorReporter(ci=True).report([parent], MANIFEST)

    assert diagnostics[1] == (
        "    [*] Error: child\n"
        "      [^] Line: /work/bucket/app.json:1:1\n"
        "      [^] Path: #/Type"
    )


def test_diagnostics_accumulate_until_cleared():
    reporter = ErrorReporter()
    reporter.report([_issue("first")], MANIFEST)
    reporter.report([_issue("second")], MANIFEST)
    assert len(reporter.diagnostics) == 2

    reporter.clear()

    assert reporter.diagnostics == []
    assert reporter.report([], MANIFEST) == []


def test_failure_diagnostics():
    missing = SchemaNotFound("schema.json")
    broken = ManifestParseError("app.json", "Expecting value: line 1 column 1 (char 0)")

    assert ErrorReporter().report_failure(missing) == ["Schema file not found: schema.json"]
    assert ErrorReporter(ci=True).report_failure(broken) == [
        "    [*] app.json: Expecting value: line 1 column 1 (char 0)"
    ]


def test_ci_not_found_failure_has_no_marker():
    reporter = ErrorReporter(ci=True)

    assert reporter.report_failure(SchemaNotFound("schema.json")) == [
        "Schema file not found: schema.json"
    ]
