"""Create Blender objects for the nodes of a scene graph."""

import logging

import bpy
from mathutils import Matrix

from chessboard3d.scene_graph import BoxShape, CylinderShape, SceneGraph, SceneNode, Shape, SphereShape
from utils.blender_utils import MaterialCache
from utils.geometry import to_blender_axes

logger = logging.getLogger(__name__)


def _create_mesh_object(shape: Shape) -> bpy.types.Object:
    """Add a primitive for `shape` at the world origin and return it."""
    if isinstance(shape, BoxShape):
        bpy.ops.mesh.primitive_cube_add(size=1, location=(0, 0, 0))
        obj = bpy.context.active_object
        # Bake the dimensions into the mesh so children are not scaled
        obj.data.transform(Matrix.Diagonal((shape.width, shape.depth, shape.height, 1.0)))
        obj.data.update()
    elif isinstance(shape, CylinderShape):
        bpy.ops.mesh.primitive_cone_add(
            vertices=shape.tessellation,
            radius1=shape.diameter_bottom / 2,
            radius2=shape.diameter_top / 2,
            depth=shape.height,
            location=(0, 0, 0)
        )
        obj = bpy.context.active_object
    elif isinstance(shape, SphereShape):
        bpy.ops.mesh.primitive_uv_sphere_add(
            segments=max(3, shape.segments * 2),
            ring_count=max(3, shape.segments),
            radius=shape.diameter / 2,
            location=(0, 0, 0)
        )
        obj = bpy.context.active_object
    else:
        raise TypeError(f"Unsupported shape: {type(shape).__name__}")
    return obj


def _get_collection(name: str) -> bpy.types.Collection:
    if name not in bpy.data.collections:
        collection = bpy.data.collections.new(name)
        bpy.context.scene.collection.children.link(collection)
    else:
        collection = bpy.data.collections[name]
    return collection


class RealizedScene:
    """Blender objects created for a scene graph, indexed like its nodes."""

    def __init__(self, graph: SceneGraph, collection: bpy.types.Collection, materials: MaterialCache):
        self.graph = graph
        self.collection = collection
        self.materials = materials
        self.objects: dict[int, bpy.types.Object] = {}

    def object_for(self, node: SceneNode) -> bpy.types.Object:
        return self.objects[node.index]

    def sync_positions(self) -> None:
        """Copy node positions onto the Blender objects (after pieces moved)."""
        for index, obj in self.objects.items():
            obj.location = to_blender_axes(self.graph.node(index).position.as_tuple())


def realize_scene_graph(graph: SceneGraph, collection_name: str = "Chessboard") -> RealizedScene:
    """
    Create one Blender mesh object per scene graph node.

    Nodes are processed in arena order, so every parent object exists before
    its children are attached to it.

    Args:
        graph: The scene graph to realize
        collection_name: Collection receiving the created objects

    Returns:
        RealizedScene mapping node indices to Blender objects
    """
    collection = _get_collection(collection_name)
    realized = RealizedScene(graph, collection, MaterialCache())

    for node in graph:
        obj = _create_mesh_object(node.shape)
        obj.name = node.name

        material = realized.materials.get(node.material)
        if material is not None:
            if obj.data.materials:
                obj.data.materials[0] = material
            else:
                obj.data.materials.append(material)

        if node.parent is not None:
            obj.parent = realized.objects[node.parent]
        obj.location = to_blender_axes(node.position.as_tuple())

        if obj.name not in collection.objects:
            collection.objects.link(obj)
        for owner in list(obj.users_collection):
            if owner != collection:
                owner.objects.unlink(obj)

        realized.objects[node.index] = obj

    logger.info(
        f"Realized {len(realized.objects)} objects with {len(realized.materials)} materials "
        f"in collection '{collection_name}'"
    )
    return realized
