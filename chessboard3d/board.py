import logging
from dataclasses import dataclass
from typing import Any

from .config.models import BoardModel
from .scene_graph import BoxShape, SceneGraph, SceneNode, Vector3

logger = logging.getLogger(__name__)


@dataclass
class Cell:
    """One square of the board."""
    i: int
    j: int
    material: Any
    node: SceneNode

    @property
    def position(self) -> Vector3:
        return self.node.position

    @property
    def is_dark(self) -> bool:
        return (self.i + self.j) % 2 == 0


class Board:
    """
    The board slab and the cells laid on top of it.

    Cells and pieces are children of the board node, so their positions are
    expressed in the board's local space, centred on its origin.
    """

    def __init__(self, graph: SceneGraph, node: SceneNode, cells_count: int, cell_size: float, board_height: float):
        self.graph = graph
        self.node = node
        self.cells_count = cells_count
        self.cell_size = cell_size
        self.board_height = board_height
        self.cells: dict[tuple[int, int], Cell] = {}

    def cell_position(self, index: int) -> float:
        """Local coordinate of cell column/row `index`: index - (cells_count - 1) / 2."""
        return index - (self.cells_count - 1) / 2

    def square_position(self, index: int) -> float:
        """Local coordinate of a piece on square `index`: index * cell_size - (cells_count - 1) / 2."""
        return index * self.cell_size - (self.cells_count - 1) / 2

    def cell(self, i: int, j: int) -> Cell:
        return self.cells[(i, j)]

    def extent(self) -> tuple[float, float]:
        """Minimum and maximum cell-centre coordinate on both horizontal axes."""
        return self.cell_position(0), self.cell_position(self.cells_count - 1)

    def __len__(self) -> int:
        return len(self.cells)


def build_board(
    cells_count: int,
    cell_size: float,
    board_height: float,
    dark_material: Any,
    light_material: Any,
    graph: SceneGraph | None = None,
    base_material: Any = None,
    name: str = "board",
) -> Board:
    """
    Build a checkerboard of `cells_count` x `cells_count` cells on a base slab.

    Cell (i, j) gets the dark material when (i + j) is even and the light one
    otherwise. Cells sit at y = board_height, on top of the slab.

    Args:
        cells_count: Number of cells along each side
        cell_size: Side length of a cell
        board_height: Thickness of the slab and of each cell
        dark_material: Material reference for even-parity cells
        light_material: Material reference for odd-parity cells
        graph: Scene graph to add the nodes to (a new one if omitted)
        base_material: Optional material for the slab itself
        name: Name of the board node

    Returns:
        The created Board

    Raises:
        ValueError: If a dimension is out of range
    """
    if not isinstance(cells_count, int) or cells_count < 1:
        raise ValueError(f"cells_count must be a positive integer, got {cells_count}")
    if cell_size <= 0:
        raise ValueError(f"cell_size must be positive, got {cell_size}")
    if board_height <= 0:
        raise ValueError(f"board_height must be positive, got {board_height}")

    if graph is None:
        graph = SceneGraph()

    side = cells_count * cell_size
    board_node = graph.add(name, BoxShape(width=side, depth=side, height=board_height), material=base_material)
    board = Board(graph, board_node, cells_count, cell_size, board_height)

    cell_shape = BoxShape(width=cell_size, depth=cell_size, height=board_height)
    for i in range(cells_count):
        for j in range(cells_count):
            material = dark_material if (i + j) % 2 == 0 else light_material
            node = graph.add(
                f"cell-{i}-{j}",
                cell_shape,
                material=material,
                position=Vector3(board.cell_position(i), board_height, board.cell_position(j)),
                parent=board_node.index,
            )
            board.cells[(i, j)] = Cell(i, j, material, node)

    logger.debug(f"Built {cells_count}x{cells_count} board '{name}' with {len(board.cells)} cells")
    return board


class ChessBoard:
    """
    Configuration-driven board creation.

    Resolves the slab, dark and light cell materials from a BoardModel and
    delegates the geometry to build_board.
    """

    def __init__(self, config: dict[str, Any] | BoardModel):
        """
        Initialize the chess board with the given configuration.

        Args:
            config: Either a BoardModel or a dictionary that can be converted to one
        """
        self.config = config if isinstance(config, BoardModel) else BoardModel.from_dict(config)
        self.board: Board | None = None

    def create(self, graph: SceneGraph | None = None) -> Board:
        """Create the board nodes and return the Board."""
        self.board = build_board(
            self.config.cells_count,
            self.config.cell_size,
            self.config.board_height,
            dark_material=self.config.get_material_model('dark'),
            light_material=self.config.get_material_model('light'),
            graph=graph,
            base_material=self.config.get_material_model('board'),
        )
        return self.board

    def get_cell_position(self, i: int, j: int) -> tuple[float, float] | None:
        """Get the (x, z) board-local position of a cell."""
        if self.board is None or (i, j) not in self.board.cells:
            return None
        position = self.board.cell(i, j).position
        return (position.x, position.z)

    def get_cell_positions(self) -> dict[str, tuple[float, float]]:
        """Get all cell positions, keyed like the cell node names."""
        if self.board is None:
            return {}
        return {
            cell.node.name: (cell.position.x, cell.position.z)
            for cell in self.board.cells.values()
        }
