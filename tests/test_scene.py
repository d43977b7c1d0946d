import pygame
import pytest

from dangame.command import Command
from dangame.identifiers import Category
from dangame.scene import Entity, SceneNode, SpriteNode, Transform


class _Recording(SceneNode):
    def __init__(self, label, log):
        super().__init__()
        self.label = label
        self.log = log

    def update_current(self, dt):
        self.log.append(("update", self.label, dt))

    def draw_current(self, target, transform):
        self.log.append(("draw", self.label, tuple(transform.apply((0, 0)))))


def test_identity_transform_keeps_point():
    assert Transform.identity().apply((3.5, -2.0)) == pygame.Vector2(3.5, -2.0)


def test_composition_matches_sequential_application():
    first = Transform(a=2.0, b=0.5, c=1.0, d=-1.0, e=3.0, f=4.0)
    second = Transform.translation(7.0, -3.0)
    point = (1.5, 2.5)
    combined = (first * second).apply(point)
    sequential = first.apply(second.apply(point))
    assert combined.x == pytest.approx(sequential.x)
    assert combined.y == pytest.approx(sequential.y)


def test_multiplying_by_non_transform_fails():
    with pytest.raises(TypeError):
        Transform() * 3


def test_local_transform_maps_origin_to_position():
    node = SceneNode()
    node.position = (10, 20)
    node.origin = (5, 5)
    node.rotation = 30
    result = node.local_transform().apply(node.origin)
    assert result.x == pytest.approx(10)
    assert result.y == pytest.approx(20)


def test_world_position_adds_parent_offset():
    parent, child = SceneNode(), SceneNode()
    parent.position = (10, 0)
    child.position = (3, 4)
    parent.attach_child(child)
    assert child.world_position() == parent.position + child.position


def test_category_depends_on_parent():
    parent, child = SceneNode(), SceneNode()
    parent.attach_child(child)
    assert parent.category() == Category.ROOT
    assert child.category() == Category.SCENE
    assert child.parent is parent


def test_detach_child_returns_node_and_clears_parent():
    parent, child = SceneNode(), SceneNode()
    parent.attach_child(child)
    detached = parent.detach_child(child)
    assert detached is child
    assert child.parent is None
    assert parent.children == ()


def test_detach_unknown_child_raises():
    with pytest.raises(ValueError):
        SceneNode().detach_child(SceneNode())


def test_update_runs_parent_before_children():
    log = []
    root = _Recording("root", log)
    middle = SceneNode()
    root.attach_child(middle)
    middle.attach_child(_Recording("a", log))
    middle.attach_child(_Recording("b", log))
    root.update(0.5)
    assert [entry[1] for entry in log] == ["root", "a", "b"]
    assert all(entry[2] == 0.5 for entry in log)
    assert middle.parent is root
    assert len(middle.children) == 2


def test_draw_passes_accumulated_transform():
    log = []
    root = _Recording("root", log)
    middle = SceneNode()
    child = _Recording("child", log)
    root.position = (2, 3)
    middle.position = (1, 1)
    child.position = (5, 7)
    root.attach_child(middle)
    middle.attach_child(child)
    root.draw(None)
    positions = {label: pos for _, label, pos in log}
    assert positions["root"] == (2, 3)
    assert positions["child"] == tuple(child.world_position())
    assert positions["child"] == (8, 11)


def test_on_command_reaches_matching_nodes_only():
    hits = []
    root = SceneNode()
    first, second = SceneNode(), SceneNode()
    root.attach_child(first)
    first.attach_child(second)
    root.on_command(Command(lambda node, dt: hits.append(node), Category.SCENE), 0.1)
    assert hits == [first, second]


def test_scene_graph_lines_indent_children(capsys):
    root, child = SceneNode(), SceneNode()
    root.attach_child(child)
    lines = list(root.scene_graph_lines())
    assert lines[0].startswith("SCENE GRAPH:Name: SceneNode Cat: 1 ")
    assert lines[1].startswith("SCENE GRAPH:  Name: SceneNode Cat: 2 ")
    root.print_scene_graph()
    assert capsys.readouterr().out.splitlines() == lines


def test_entity_moves_by_velocity():
    entity = Entity()
    entity.position = (1, 1)
    entity.velocity = (2, 3)
    start = pygame.Vector2(entity.position)
    entity.update(0.5)
    assert entity.position == start + entity.velocity * 0.5


def test_entity_accelerate_adds_to_velocity():
    entity = Entity()
    entity.velocity = (1, 2)
    entity.accelerate(0.5, -4)
    assert entity.velocity == pygame.Vector2(1.5, -2)


def test_sprite_node_tiles_rect_and_draws():
    color = (200, 10, 30, 255)
    texture = pygame.Surface((2, 2))
    texture.fill(color)
    node = SpriteNode(texture, (0, 0, 5, 4))
    assert node.image.get_size() == (5, 4)
    assert node.image.get_at((4, 3)) == color
    assert node.name() == "SpriteNode"
    target = pygame.Surface((20, 20))
    node.position = (6, 7)
    node.draw(target)
    assert target.get_at((6, 7)) == color
    assert target.get_at((5, 7)) != color
    assert target.get_at((0, 0)) == (0, 0, 0, 255)


def test_sprite_node_without_rect_uses_texture():
    texture = pygame.Surface((3, 3))
    node = SpriteNode(texture)
    assert node.image is texture