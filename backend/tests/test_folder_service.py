"""Tests for folder operations."""
import pytest

from conftest import make_file, make_folder, make_state
from dataroom.domain.exceptions import FolderNotFoundError, ValidationError
from dataroom.services.folder_service import (
    collect_descendant_ids,
    create_folder,
    delete_folder,
    rename_folder,
)
from dataroom.services.state_service import check_invariants


def _find(state, name):
    return next(folder for folder in state.folders.values() if folder.name == name)


def test_create_folder(root_only_state, ids, clock):
    state = create_folder(root_only_state, "root", "Contracts", id_factory=ids, clock=clock)

    folder = state.folders["id-1"]
    assert folder.name == "Contracts"
    assert folder.parent_id == "root"
    assert folder.created_at == folder.updated_at
    check_invariants(state)


def test_create_folder_does_not_touch_input(root_only_state, ids, clock):
    create_folder(root_only_state, "root", "Contracts", id_factory=ids, clock=clock)
    assert list(root_only_state.folders) == ["root"]


def test_create_same_name_three_times(root_only_state, ids, clock):
    state = root_only_state
    for _ in range(3):
        state = create_folder(state, "root", "New Folder", id_factory=ids, clock=clock)

    names = [state.folders[f"id-{n}"].name for n in (1, 2, 3)]
    assert names == ["New Folder", "New Folder (1)", "New Folder (2)"]


def test_create_folder_trims_name(root_only_state, ids, clock):
    state = create_folder(root_only_state, "root", "  Finance  ", id_factory=ids, clock=clock)
    assert state.folders["id-1"].name == "Finance"


@pytest.mark.parametrize("name", ["", "   ", "a/b", "what?", "x" * 256])
def test_create_folder_rejects_invalid_names(root_only_state, name):
    with pytest.raises(ValidationError):
        create_folder(root_only_state, "root", name)


def test_create_folder_in_missing_parent(root_only_state):
    with pytest.raises(FolderNotFoundError):
        create_folder(root_only_state, "nope", "Orphan")


def test_rename_folder(base_state, clock):
    before = base_state.folders["folder_a"]
    state = rename_folder(base_state, "folder_a", "Legal", clock=clock)

    after = state.folders["folder_a"]
    assert after.name == "Legal"
    assert after.created_at == before.created_at
    assert after.updated_at > before.updated_at
    # Untouched input
    assert base_state.folders["folder_a"].name == "New Folder"


def test_rename_folder_to_sibling_name(base_state, clock):
    state = create_folder(base_state, "root", "Legal", id_factory=lambda: "legal", clock=clock)
    state = rename_folder(state, "legal", "New Folder", clock=clock)
    assert state.folders["legal"].name == "New Folder (2)"


def test_rename_folder_case_change_does_not_collide_with_itself(base_state, clock):
    state = rename_folder(base_state, "folder_a", "NEW FOLDER", clock=clock)
    assert state.folders["folder_a"].name == "NEW FOLDER"


def test_rename_folder_to_same_name_keeps_timestamp(base_state, clock):
    state = rename_folder(base_state, "folder_a", " New Folder ", clock=clock)
    assert state is base_state


def test_rename_folder_resolving_to_current_name_keeps_timestamp(base_state, clock):
    # "New Folder" is taken by a sibling, so the name resolves back to "New Folder (1)"
    state = rename_folder(base_state, "folder_b", "New Folder", clock=clock)
    assert state is base_state
    assert state.folders["folder_b"].updated_at == base_state.folders["folder_b"].updated_at


def test_rename_missing_folder_is_noop(base_state, clock):
    assert rename_folder(base_state, "ghost", "Anything", clock=clock) is base_state


def test_rename_folder_rejects_empty_name(base_state):
    with pytest.raises(ValidationError):
        rename_folder(base_state, "folder_a", "   ")


def _nested_state():
    return make_state(
        folders=[
            make_folder("root", "Root", None),
            make_folder("parent", "Parent", "root"),
            make_folder("child", "Child", "parent"),
            make_folder("grandchild", "Grandchild", "child"),
            make_folder("sibling", "Sibling", "root"),
        ],
        files=[
            make_file("f_parent", "a.pdf", "parent"),
            make_file("f_child", "b.pdf", "child"),
            make_file("f_grandchild", "c.pdf", "grandchild"),
            make_file("f_sibling", "d.pdf", "sibling"),
            make_file("f_root", "e.pdf", "root"),
        ]
    )


def test_delete_folder_cascades():
    state = _nested_state()
    result = delete_folder(state, "parent")

    assert set(result.folders) == {"root", "sibling"}
    assert set(result.files) == {"f_sibling", "f_root"}
    check_invariants(result)
    # Input still intact
    assert len(state.folders) == 5 and len(state.files) == 5


def test_delete_leaf_folder():
    result = delete_folder(_nested_state(), "grandchild")
    assert "grandchild" not in result.folders
    assert "f_grandchild" not in result.files
    assert {"parent", "child"} <= set(result.folders)


def test_delete_missing_folder_is_noop():
    state = _nested_state()
    assert delete_folder(state, "ghost") is state


def test_delete_root_is_rejected():
    with pytest.raises(ValidationError):
        delete_folder(_nested_state(), "root")


def test_collect_descendants_handles_deep_trees():
    depth = 5000
    folders = [make_folder("root", "Root", None)]
    parent = "root"
    for level in range(depth):
        folders.append(make_folder(f"f{level}", f"Level {level}", parent))
        parent = f"f{level}"
    state = make_state(folders=folders)

    assert len(collect_descendant_ids(state, "f0")) == depth
    assert list(delete_folder(state, "f0").folders) == ["root"]
