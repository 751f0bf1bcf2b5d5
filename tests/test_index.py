"""Tests for the introspection index module."""

import pytest
import msgspec

from sclookup.graph import IntrospectionIndex

from conftest import LIB, EXT


class TestIntrospectionIndex:
    def test_load_classes(self, index):
        assert index.is_ready()
        assert set(index.classes) == {"Object", "Player", "Synth", "Routine"}

    def test_empty_index_not_ready(self):
        index = IntrospectionIndex()
        assert not index.is_ready()
        assert index.find_class("Object") is None

    def test_snapshot_without_classes_is_ready(self, make_index):
        assert make_index([]).is_ready()

    def test_find_class_exact(self, index):
        klass = index.find_class("Player")
        assert klass.name == "Player"
        assert klass.definition.path == f"{LIB}/Streams/Player.sc"
        assert klass.definition.position == 5

    def test_find_class_case_sensitive(self, index):
        assert index.find_class("player") is None
        assert index.find_class("Play") is None

    def test_superclass_chain(self, index):
        chain = [k.name for k in index.find_class("Player").chain()]
        assert chain == ["Player", "Object"]
        assert index.find_class("Object").superclass is None

    def test_meta_class_holds_class_methods(self, index):
        meta = index.find_class("Player").meta_class
        assert meta.name == "Meta_Player"
        assert [m.name for m in meta.methods] == ["new"]
        assert all(m.is_class_side for m in meta.methods)

    def test_methods_in_declaration_order(self, index):
        methods = index.find_class("Object").methods
        assert [m.name for m in methods] == ["dump", "asRoutine"]
        assert not any(m.is_class_side for m in methods)

    def test_method_path_defaults_to_class(self, index):
        dump, as_routine = index.find_class("Object").methods
        assert dump.definition.path == f"{LIB}/Core/Object.sc"
        assert as_routine.definition.path == f"{EXT}/extObject.sc"

    def test_methods_by_name_includes_class_side(self, index):
        methods = index.methods_by_name("new")
        assert sorted(m.owner_name for m in methods) == ["Meta_Object", "Meta_Player"]

    def test_methods_by_name_unknown(self, index):
        assert index.methods_by_name("nothing") == []

    def test_find_class_partial(self, index):
        classes = index.find_class_partial("t")
        assert [k.name for k in classes] == ["Object", "Routine", "Synth"]

    def test_find_class_partial_skips_meta_classes(self, index):
        assert index.find_class_partial("Meta_") == []

    def test_find_method_partial(self, index):
        methods = index.find_method_partial("ump")
        assert [m.name for m in methods] == ["dump"]

    def test_find_method_partial_case_sensitive(self, index):
        assert index.find_method_partial("Play") == []


class TestSignature:
    def test_instance_method(self, index):
        play = index.find_class("Player").methods[0]
        assert play.signature() == "Player: play"

    def test_class_method(self, index):
        new = index.find_class("Player").meta_class.methods[0]
        assert new.signature() == "Player: *new"

    def test_with_arguments(self, index):
        play = index.find_class("Player").methods[0]
        assert play.signature(with_arguments=True) == "Player: play (clock)"

    def test_with_arguments_none_declared(self, index):
        stop = index.find_class("Player").methods[1]
        assert stop.signature(with_arguments=True) == "Player: stop"


class TestCompactPath:
    def test_class_library_path(self, index):
        assert index.compact_path(f"{LIB}/Streams/Player.sc") == "SCClassLibrary/Streams/Player.sc"

    def test_extension_path(self, index):
        assert index.compact_path(f"{EXT}/Routine.sc") == "Extensions/Routine.sc"

    def test_longest_root_wins(self, index):
        assert index.compact_path("/usr/share/SuperCollider/sounds/a.wav") == "SC/sounds/a.wav"

    def test_outside_library(self, index):
        assert index.compact_path("/tmp/scratch.scd") == "/tmp/scratch.scd"

    def test_root_prefix_needs_separator(self, index):
        path = f"{EXT}Old/Foo.sc"
        assert index.compact_path(path) == path

    def test_empty_alias_strips_root(self, make_index):
        index = make_index([], library_roots=[{"path": "/lib/"}])
        assert index.compact_path("/lib/x.sc") == "x.sc"


    def test_filesystem_root(self, make_index):
        index = make_index([], library_roots=[{"path": "/", "alias": "root"}])
        assert index.compact_path("/tmp/a.sc") == "root/tmp/a.sc"

    def test_filesystem_root_without_alias(self, make_index):
        index = make_index([], library_roots=[{"path": "/"}])
        assert index.compact_path("/tmp/a.sc") == "tmp/a.sc"

    def test_nested_root_beats_filesystem_root(self, make_index):
        index = make_index([], library_roots=[{"path": "/"}, {"path": "/lib", "alias": "Lib"}])
        assert index.compact_path("/lib/x.sc") == "Lib/x.sc"


class TestSnapshotErrors:
    def test_duplicate_class(self, make_index):
        with pytest.raises(ValueError, match="Duplicate"):
            make_index([{"name": "A", "path": "/a.sc"}, {"name": "A", "path": "/b.sc"}])

    def test_unknown_superclass(self, make_index):
        with pytest.raises(ValueError, match="Unknown superclass"):
            make_index([{"name": "A", "path": "/a.sc", "superclass": "Missing"}])

    def test_inheritance_cycle(self, make_index):
        with pytest.raises(ValueError, match="cycle"):
            make_index([
                {"name": "A", "path": "/a.sc", "superclass": "B"},
                {"name": "B", "path": "/b.sc", "superclass": "A"},
            ])

    def test_meta_class_listed(self, make_index):
        with pytest.raises(ValueError, match="Metaclasses"):
            make_index([{"name": "Meta_A", "path": "/a.sc"}])

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            IntrospectionIndex.load(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(msgspec.DecodeError):
            IntrospectionIndex.load(path)

    def test_wrong_shape(self, tmp_path):
        path = tmp_path / "shape.json"
        path.write_text('{"classes": [{"name": "A"}]}')
        with pytest.raises(msgspec.ValidationError):
            IntrospectionIndex.load(path)
