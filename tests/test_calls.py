from archgraph.calls import collect_calls, is_builtin
from archgraph.go_parse import parse_source


def _body_of(path, name):
	tree = parse_source(str(path))
	for decl in tree.root_node.named_children:
		if decl.type in ("function_declaration", "method_declaration"):
			if decl.child_by_field_name("name").text.decode() == name:
				return decl.child_by_field_name("body")
	raise AssertionError(f"no declaration {name}")


def test_collect_calls_classifies_callees(tmp_path):
	p = tmp_path / "a.go"
	p.write_text(
		"package a\n"
		"\n"
		"func run(s *Service) {\n"
		"\titems := make([]int, 0, len(s.items))\n"
		"\titems = append(items, helper())\n"
		"\ts.Start()\n"
		"\ts.cfg.Load()\n"
		"\tfmt.Println(items)\n"
		"\tfunc() {\n"
		"\t\tinner()\n"
		"\t}()\n"
		"}\n"
	)
	calls = collect_calls(_body_of(p, "run"))
	summary = [(c.target, c.is_selector, c.receiver, c.line) for c in calls]
	assert summary == [
		("helper", False, "", 5),
		("Start", True, "s", 6),
		("Println", True, "fmt", 8),
		("inner", False, "", 10),
	]


def test_outer_call_recorded_before_nested_argument_call(tmp_path):
	p = tmp_path / "a.go"
	p.write_text("package a\n\nfunc f() {\n\touter(inner(1))\n}\n")
	assert [c.target for c in collect_calls(_body_of(p, "f"))] == ["outer", "inner"]


def test_calls_in_nested_blocks_are_found(tmp_path):
	p = tmp_path / "a.go"
	p.write_text(
		"package a\n"
		"\n"
		"func f(xs []int) {\n"
		"\tfor _, x := range xs {\n"
		"\t\tif x > 0 {\n"
		"\t\t\tgo worker(x)\n"
		"\t\t}\n"
		"\t}\n"
		"\tdefer cleanup()\n"
		"}\n"
	)
	assert [c.target for c in collect_calls(_body_of(p, "f"))] == ["worker", "cleanup"]


def test_collect_calls_without_body():
	assert collect_calls(None) == []


def test_builtins():
	for name in ["make", "new", "len", "cap", "append", "panic", "recover", "imag"]:
		assert is_builtin(name)
	assert not is_builtin("helper")
