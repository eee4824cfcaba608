import json

from archforge.graph.schema import DiagramEdge, DiagramNode
from archforge.pipeline.diagram_extractor import normalize_completion
from archforge.pipeline.stages import StageResult, validate_diagram
from archforge.pipeline.diagnostics import Diagnostics


def test_fenced_json_wrapped_in_prose():
    raw = (
        "Here is the architecture you asked for:\n"
        '```json\n{"nodes":[{"id":"a","label":"A"}],"edges":[]}\n```\n'
        "Let me know if you want changes."
    )
    diagram, diagnostics = normalize_completion(raw)

    assert diagram.nodes == (DiagramNode(id="a", label="A"),)
    assert diagram.edges == ()
    assert diagnostics.used_fallback is False
    assert diagnostics.extracted_json == '{"nodes":[{"id":"a","label":"A"}],"edges":[]}'
    assert diagnostics.repair_applied is None
    assert diagnostics.raw_content == raw


def test_trailing_comma_repair():
    diagram, diagnostics = normalize_completion('{"nodes":[{"id":"a","label":"A"},],"edges":[]}')

    assert diagram.nodes == (DiagramNode(id="a", label="A"),)
    assert diagnostics.repair_applied == "removed trailing commas"
    assert diagnostics.parse_error is None
    assert diagnostics.used_fallback is False


def test_key_aliasing():
    raw = '{"nodes":[{"id":"x","name":"X Node"}],"edges":[{"source":"x","target":"x"}]}'
    diagram, diagnostics = normalize_completion(raw)

    assert diagram.nodes == (DiagramNode(id="x", label="X Node"),)
    assert diagram.edges == (DiagramEdge(from_id="x", to_id="x"),)
    assert diagnostics.used_fallback is False


def test_label_alias_priority_and_id_fallback():
    raw = json.dumps(
        {
            "nodes": [
                {"id": "a", "label": "", "name": "", "text": "Text", "title": "Title"},
                {"id": "b", "title": "Title B"},
                {"id": "c"},
                {"id": "d", "label": True},
            ],
            "edges": [{"from": "a", "source": "z", "target": "b"}],
        }
    )
    diagram, _ = normalize_completion(raw)

    assert [n.label for n in diagram.nodes] == ["Text", "Title B", "c", "d"]
    assert diagram.edges == (DiagramEdge(from_id="a", to_id="b"),)


def test_numbers_are_coerced_to_strings():
    raw = '{"nodes":[{"id":1,"label":2},{"id":3.0}],"edges":[{"from":1,"to":3}]}'
    diagram, _ = normalize_completion(raw)

    assert diagram.nodes == (DiagramNode(id="1", label="2"), DiagramNode(id="3", label="3"))
    assert diagram.edges == (DiagramEdge(from_id="1", to_id="3"),)


def test_incomplete_records_are_dropped():
    raw = '{"nodes":[{"label":"no id"},{"id":""},{"id":"ok"}],"edges":[{"from":"ok"},{"to":"ok"}]}'
    diagram, diagnostics = normalize_completion(raw)

    assert diagram.nodes == (DiagramNode(id="ok", label="ok"),)
    assert diagram.edges == ()
    assert diagnostics.used_fallback is False


def test_extra_keys_are_ignored():
    raw = '{"title":"t","nodes":[{"id":"a","label":"A","type":"db"}],"edges":[{"from":"a","to":"a","label":"x"}]}'
    diagram, _ = normalize_completion(raw)

    assert diagram.nodes == (DiagramNode(id="a", label="A"),)
    assert diagram.edges == (DiagramEdge(from_id="a", to_id="a"),)


def test_missing_or_null_arrays_are_empty():
    diagram, diagnostics = normalize_completion('{"nodes": null}')

    assert diagram.is_empty
    assert diagnostics.used_fallback is False


def test_total_garbage_falls_back():
    diagram, diagnostics = normalize_completion("I am unable to produce a diagram for that request.")

    assert diagram.nodes == ()
    assert diagram.edges == ()
    assert diagnostics.used_fallback is True
    assert diagnostics.parse_error == "No JSON object found in model response."
    assert diagnostics.extracted_json is None


def test_empty_content_falls_back():
    diagram, diagnostics = normalize_completion("  \n ")

    assert diagram.is_empty
    assert diagnostics.used_fallback is True
    assert diagnostics.parse_error is None


def test_unbalanced_braces_fall_back():
    diagram, diagnostics = normalize_completion('{"nodes": [{"id": "a"}')

    assert diagram.is_empty
    assert diagnostics.used_fallback is True
    assert diagnostics.parse_error == "Unbalanced braces in model response."


def test_unrepairable_json_falls_back():
    diagram, diagnostics = normalize_completion('{"nodes": [oops]}')

    assert diagram.is_empty
    assert diagnostics.used_fallback is True
    assert diagnostics.parse_error.startswith("JSON parse failed:")
    assert diagnostics.repair_applied is None


def test_failed_repair_is_still_recorded():
    _, diagnostics = normalize_completion('{"nodes": [oops,]}')

    assert diagnostics.used_fallback is True
    assert diagnostics.repair_applied == "removed trailing commas"


def test_wrong_shape_falls_back_with_validation_error():
    diagram, diagnostics = normalize_completion('{"nodes": "api, db", "edges": []}')

    assert diagram.is_empty
    assert diagnostics.used_fallback is True
    assert diagnostics.validation_error.startswith("nodes:")


def test_non_object_nodes_fall_back():
    diagram, diagnostics = normalize_completion('{"nodes": ["api", "db"]}')

    assert diagram.is_empty
    assert diagnostics.used_fallback is True
    assert "nodes.0" in diagnostics.validation_error


def test_over_limit_nodes_are_returned_best_effort():
    nodes = [{"id": f"n{i}", "label": f"Node {i}"} for i in range(201)]
    diagram, diagnostics = normalize_completion(json.dumps({"nodes": nodes, "edges": []}))

    assert len(diagram.nodes) == 201
    assert diagnostics.used_fallback is False
    assert diagnostics.validation_error.startswith("Strict validation issues:")


def test_over_limit_edges_are_returned_best_effort():
    edges = [{"from": "a", "to": "a"}] * 401
    diagram, diagnostics = normalize_completion(json.dumps({"nodes": [{"id": "a", "label": "A"}], "edges": edges}))

    assert len(diagram.edges) == 401
    assert diagnostics.validation_error.startswith("Strict validation issues:")


def test_long_label_is_returned_best_effort():
    diagram, diagnostics = normalize_completion(json.dumps({"nodes": [{"id": "a", "label": "x" * 201}]}))

    assert diagram.nodes[0].label == "x" * 201
    assert diagnostics.validation_error is not None
    assert diagnostics.used_fallback is False


def test_validate_diagram_rejects_non_object():
    diagnostics = Diagnostics()
    result = validate_diagram("just a string", diagnostics)

    assert isinstance(result, StageResult)
    assert not result.ok
    assert diagnostics.validation_error == result.error


def test_stage_result():
    assert StageResult.success(0).ok
    assert StageResult.success(None).value is None
    assert not StageResult.failure("nope").ok


def test_deeply_nested_objects_fall_back():
    diagram, diagnostics = normalize_completion('{"a":' * 50000 + "1" + "}" * 50000)

    assert diagram.is_empty
    assert diagnostics.used_fallback is True
    assert diagnostics.parse_error.startswith("JSON parse failed:")


def test_deeply_nested_arrays_fall_back():
    diagram, diagnostics = normalize_completion('{"nodes": ' + "[" * 100000 + "]" * 100000 + "}")

    assert diagram.is_empty
    assert diagnostics.used_fallback is True
    assert diagnostics.parse_error.startswith("JSON parse failed:")


def test_non_json_constants_fall_back():
    diagram, diagnostics = normalize_completion('{"nodes":[{"id": NaN, "label": "x"}, {"id": Infinity}],"edges":[]}')

    assert diagram.is_empty
    assert diagnostics.used_fallback is True
    assert "Invalid JSON constant" in diagnostics.parse_error


def test_negative_infinity_is_rejected_after_repair():
    diagram, diagnostics = normalize_completion('{"nodes":[{"id": -Infinity},],"edges":[]}')

    assert diagram.is_empty
    assert diagnostics.repair_applied == "removed trailing commas"
    assert diagnostics.used_fallback is True
