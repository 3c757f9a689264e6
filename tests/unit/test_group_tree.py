"""Tests for the group tree."""
import pytest
from unittest.mock import Mock

from pathtree.core.exceptions import GroupFullPathMustStartWithSlashError, InvalidPathError
from pathtree.core.groups import GroupGetOptions, GroupNode, GroupTree, MemoryGroupFactory


class TestGroupNode:
    """Test suite for GroupNode."""

    def test_root_is_own_main_group(self):
        node = GroupNode(name="Project", full_path="/Project")

        assert node.is_main_group
        assert node.main_group == node.handle
        assert len(node.handle) == 8

    def test_make_child(self):
        """Test child paths are built from the parent path."""
        root = GroupNode(name="/", full_path="/")
        child = root.make_child("A")
        grandchild = child.make_child("B")

        assert child.full_path == "/A"
        assert grandchild.full_path == "/A/B"
        assert grandchild.main_group == root.handle
        assert grandchild.parent_handle == child.handle

    def test_add_child_never_replaces(self):
        root = GroupNode(name="/", full_path="/")
        first = root.add_child(root.make_child("A"))

        second = root.add_child(root.make_child("A"))

        assert second is first
        assert len(root) == 1

    def test_children_returns_copy(self):
        root = GroupNode(name="/", full_path="/")
        root.add_child(root.make_child("A"))

        root.children.clear()

        assert root.find_child("A") is not None

    def test_path_property(self):
        node = GroupNode(name="B", full_path="/A/B")

        assert node.path.components == ("/", "A", "B")

    def test_relative_to_root(self):
        root = GroupNode(name="Project", full_path="/Project")
        node = GroupNode(name="A", full_path="/Project/A")

        assert node.relative_to(root) == "A"

    def test_relative_to_strips_textual_prefix(self):
        """Test the root path is removed as plain text, not by component."""
        root = GroupNode(name="Pro", full_path="/Pro")
        node = GroupNode(name="A", full_path="/Project/A")

        assert node.relative_to(root) == "ject/A"

    def test_relative_to_non_prefix_root(self):
        root = GroupNode(name="Project", full_path="/Project")
        node = GroupNode(name="A", full_path="/Other/A")

        assert node.relative_to(root) == "Other/A"

    def test_dict_round_trip(self):
        root = GroupNode(name="/", full_path="/")
        child = root.make_child("A")

        restored = GroupNode.from_dict(child.to_dict())

        assert restored.handle == child.handle
        assert restored.full_path == "/A"
        assert restored.main_group == root.handle


class TestGroupTreeLookup:
    """Test suite for GroupTree.lookup."""

    def test_root(self, tree):
        assert tree.lookup("/") is tree.root

    def test_missing(self, tree):
        assert tree.lookup("/A") is None

    def test_partial_path_not_found(self, tree):
        """Test a path that only partly exists returns None."""
        tree.resolve_or_create("/A")

        assert tree.lookup("/A/B") is None

    def test_requires_leading_slash(self, tree):
        with pytest.raises(InvalidPathError) as exc_info:
            tree.lookup("A")

        assert exc_info.value.path == "A"


class TestGroupTreeCreate:
    """Test suite for group creation."""

    def test_project_example(self, project_tree):
        """Test creating a nested group under a named root."""
        core = project_tree.resolve_or_create("/Project/Sources/Core")

        assert project_tree.node_count() == 3
        assert core.name == "Core"
        assert core.full_path == "/Project/Sources/Core"
        assert project_tree.lookup("/Project/Sources/Core") is core
        assert project_tree.lookup("/Project/Sources").name == "Sources"

    def test_idempotent(self, tree):
        """Test resolving the same path twice creates nodes only once."""
        first = tree.resolve_or_create("/A/B")
        second = tree.resolve_or_create("/A/B")

        assert second is first
        assert tree.node_count() == 3
        assert len(tree.root.find_child("A")) == 1

    def test_creates_every_intermediate(self, tree):
        """Test every missing group on the path goes through the factory."""
        factory = Mock(wraps=MemoryGroupFactory())
        tree = GroupTree(tree.root, factory)

        tree.resolve_or_create("/A/B/C", create_folders=False, persist=True)

        names = [c.args[1] for c in factory.create_child.call_args_list]
        assert names == ["A", "B", "C"]
        assert factory.create_child.call_args_list[0].args[2:] == (False, True)

    def test_existing_prefix_is_reused(self, tree):
        factory = Mock(wraps=MemoryGroupFactory())
        tree = GroupTree(tree.root, factory)
        tree.resolve_or_create("/A")

        tree.resolve_or_create("/A/B")

        names = [c.args[1] for c in factory.create_child.call_args_list]
        assert names == ["A", "B"]

    def test_root_prefix_is_optional(self, project_tree):
        """Test paths under a named root may omit the root name."""
        sources = project_tree.create_sub_group("/Sources")

        assert sources.full_path == "/Project/Sources"
        assert project_tree.lookup("/Project/Sources") is sources

    def test_empty_components_ignored(self, tree):
        node = tree.resolve_or_create("/A//B/")

        assert tree.lookup("/A/B") is node

    def test_create_sub_group_requires_leading_slash(self, tree):
        """Test an invalid path fails before any group is created."""
        tree.resolve_or_create("/A")
        before = tree.node_count()

        with pytest.raises(GroupFullPathMustStartWithSlashError) as exc_info:
            tree.create_sub_group("A/B")

        assert isinstance(exc_info.value, InvalidPathError)
        assert str(exc_info.value) == "Group Path 'A/B' must start with a slash(/)"
        assert tree.node_count() == before

    def test_resolve_or_create_invalid_path(self, tree):
        with pytest.raises(InvalidPathError):
            tree.resolve_or_create("A")

        assert tree.node_count() == 1

    def test_create_with_relative_root(self):
        with pytest.raises(InvalidPathError):
            GroupTree.create("Project")

    def test_main_group_handles(self, project_tree):
        core = project_tree.create_sub_group("/Project/Sources/Core")

        assert core.main_group == project_tree.root.handle
        assert project_tree.get(core.handle) is core
        assert project_tree.relative_path(core) == "Sources/Core"

    def test_relative_path_under_slash_root(self, tree):
        node = tree.create_sub_group("/A/B")

        assert tree.relative_path(node) == "A/B"

    def test_iter_nodes_pre_order(self, tree):
        tree.create_sub_group("/A/B")
        tree.create_sub_group("/C")

        assert [n.full_path for n in tree.iter_nodes()] == ["/", "/A", "/A/B", "/C"]


class TestSubGroup:
    """Test suite for GroupTree.sub_group."""

    def test_get_does_not_create(self, tree):
        assert tree.sub_group("/A") is None
        assert tree.node_count() == 1

    def test_get_existing(self, tree):
        node = tree.create_sub_group("/A")

        assert tree.sub_group("/A") is node

    def test_create_only(self, tree):
        """Test CREATE_ONLY creates without folders or persistence."""
        factory = Mock(wraps=MemoryGroupFactory())
        tree = GroupTree(tree.root, factory)

        node = tree.sub_group("/A", GroupGetOptions.CREATE_ONLY)

        assert node.full_path == "/A"
        assert factory.create_child.call_args.args[2:] == (False, False)

    def test_create_and_save(self, tree):
        factory = Mock(wraps=MemoryGroupFactory())
        tree = GroupTree(tree.root, factory)

        tree.sub_group("/A", GroupGetOptions.CREATE_AND_SAVE)

        assert factory.create_child.call_args.args[2:] == (True, True)

    def test_invalid_path_with_create(self, tree):
        with pytest.raises(InvalidPathError):
            tree.sub_group("A", GroupGetOptions.CREATE_ONLY)
