"""
The GEOMETRY layer turns settings into mesh buffers.
It has NO knowledge of the editor surface or of rendering.
"""
