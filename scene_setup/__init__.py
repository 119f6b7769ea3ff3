"""
Blender scene setup: camera, lighting, render settings and realization of the
chess scene graph.

Submodules import bpy; scene_setup.models does not, so configuration can be
loaded outside Blender.
"""
