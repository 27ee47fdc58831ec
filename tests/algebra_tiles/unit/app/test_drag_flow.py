from algebra_tiles.app.services.drag_flow import DragFlowService, HeldTileState
from algebra_tiles.core.models import Orientation, Point, Rect, TileKind

DELETE_ZONE = Rect(900.0, 0.0, 100.0, 100.0)


def test_pointer_down_grabs_topmost_and_brings_it_to_front(make_tile) -> None:
    square = make_tile(TileKind.SQUARE, 0.0, 0.0)
    unit = make_tile(TileKind.UNIT, 10.0, 10.0)
    other = make_tile(TileKind.BAR, 500.0, 500.0)
    tiles = [square, unit, other]

    result = DragFlowService.on_pointer_down(tiles=tiles, held_state=HeldTileState.empty(), x=15.0, y=15.0)
    assert result.handled
    assert result.held_state == HeldTileState(tile_id=unit.tile_id, offset_x=5.0, offset_y=5.0)
    assert result.status == "Holding 1."
    assert tiles[-1] is unit

    result = DragFlowService.on_pointer_down(tiles=tiles, held_state=HeldTileState.empty(), x=50.0, y=50.0)
    assert result.held_state.tile_id == square.tile_id
    assert tiles == [other, unit, square]


def test_pointer_down_on_empty_plane_or_while_holding_is_ignored(make_tile) -> None:
    square = make_tile(TileKind.SQUARE, 0.0, 0.0)
    tiles = [square]
    miss = DragFlowService.on_pointer_down(tiles=tiles, held_state=HeldTileState.empty(), x=400.0, y=400.0)
    assert not miss.handled
    assert not miss.held_state.is_holding

    held = HeldTileState(tile_id=99)
    busy = DragFlowService.on_pointer_down(tiles=tiles, held_state=held, x=10.0, y=10.0)
    assert not busy.handled
    assert busy.held_state is held


def test_pointer_move_keeps_grab_offset(make_tile) -> None:
    square = make_tile(TileKind.SQUARE, 0.0, 0.0)
    tiles = [square]
    held = DragFlowService.on_pointer_down(
        tiles=tiles, held_state=HeldTileState.empty(), x=50.0, y=60.0
    ).held_state
    moved = DragFlowService.on_pointer_move(tiles=tiles, held_state=held, x=110.0, y=70.0)
    assert moved.handled
    assert (square.x, square.y) == (60.0, 10.0)

    idle = DragFlowService.on_pointer_move(tiles=tiles, held_state=HeldTileState.empty(), x=0.0, y=0.0)
    assert not idle.handled
    assert (square.x, square.y) == (60.0, 10.0)


def test_release_in_delete_zone_removes_tile(make_tile) -> None:
    bar = make_tile(TileKind.BAR, 100.0, 100.0)
    tiles = [bar]
    result = DragFlowService.on_pointer_release(
        tiles=tiles,
        held_state=HeldTileState(tile_id=bar.tile_id),
        screen_x=950.0,
        screen_y=50.0,
        delete_zone=DELETE_ZONE,
        snap_tolerance=15.0,
    )
    assert result.handled
    assert result.deleted_tile_id == bar.tile_id
    assert result.status == "Deleted x."
    assert tiles == []
    assert not result.held_state.is_holding


def test_release_snaps_against_other_tiles(make_tile) -> None:
    square = make_tile(TileKind.SQUARE, 0.0, 0.0)
    unit = make_tile(TileKind.UNIT, 203.0, 5.0)
    tiles = [square, unit]
    result = DragFlowService.on_pointer_release(
        tiles=tiles,
        held_state=HeldTileState(tile_id=unit.tile_id),
        screen_x=210.0,
        screen_y=10.0,
        delete_zone=DELETE_ZONE,
        snap_tolerance=15.0,
    )
    assert result.snapped_to == Point(200.0, 0.0)
    assert (unit.x, unit.y) == (200.0, 0.0)
    assert result.status == "Placed 1."
    assert (square.x, square.y) == (0.0, 0.0)


def test_release_without_neighbour_keeps_position(make_tile) -> None:
    unit = make_tile(TileKind.UNIT, 333.0, 444.0)
    result = DragFlowService.on_pointer_release(
        tiles=[unit],
        held_state=HeldTileState(tile_id=unit.tile_id),
        screen_x=340.0,
        screen_y=450.0,
        delete_zone=None,
        snap_tolerance=15.0,
    )
    assert result.handled
    assert result.snapped_to is None
    assert (unit.x, unit.y) == (333.0, 444.0)


def test_cancel_drops_grab_without_moving(make_tile) -> None:
    unit = make_tile(TileKind.UNIT, 203.0, 5.0)
    result = DragFlowService.on_pointer_cancel(held_state=HeldTileState(tile_id=unit.tile_id))
    assert result.handled
    assert result.status == "Drag cancelled."
    assert not result.held_state.is_holding
    assert (unit.x, unit.y) == (203.0, 5.0)
    assert not DragFlowService.on_pointer_cancel(held_state=HeldTileState.empty()).handled


def test_double_activate_rotates_bars_only(make_tile) -> None:
    bar = make_tile(TileKind.BAR, 0.0, 0.0)
    unit = make_tile(TileKind.UNIT, 400.0, 400.0)
    tiles = [bar, unit]
    held = HeldTileState.empty()

    rotated = DragFlowService.on_double_activate(tiles=tiles, held_state=held, x=100.0, y=10.0)
    assert rotated.handled
    assert bar.orientation is Orientation.VERTICAL
    assert (bar.width, bar.height) == (25.0, 200.0)
    assert rotated.status == "Rotated x (VERTICAL)."

    ignored = DragFlowService.on_double_activate(tiles=tiles, held_state=held, x=410.0, y=410.0)
    assert not ignored.handled
    assert unit.orientation is Orientation.HORIZONTAL
    assert not DragFlowService.on_double_activate(tiles=tiles, held_state=held, x=900.0, y=900.0).handled


def test_spawn_centres_new_tile_on_pointer_and_holds_it(scale) -> None:
    tiles = []
    result = DragFlowService.on_spawn(
        tiles=tiles,
        held_state=HeldTileState.empty(),
        tile_id=7,
        kind=TileKind.BAR,
        is_negative=True,
        scale=scale,
        x=300.0,
        y=300.0,
    )
    assert result.handled
    assert result.status == "Holding new negative x."
    assert len(tiles) == 1
    spawned = tiles[0]
    assert (spawned.tile_id, spawned.is_negative) == (7, True)
    assert (spawned.x, spawned.y) == (200.0, 287.5)
    assert result.held_state == HeldTileState(tile_id=7, offset_x=100.0, offset_y=12.5)


def test_spawn_refused_while_holding(scale) -> None:
    tiles = []
    held = HeldTileState(tile_id=1)
    result = DragFlowService.on_spawn(
        tiles=tiles,
        held_state=held,
        tile_id=2,
        kind=TileKind.UNIT,
        is_negative=False,
        scale=scale,
        x=0.0,
        y=0.0,
    )
    assert not result.handled
    assert tiles == []
