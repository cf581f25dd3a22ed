"""
The MODEL layer contains pure data structures: placement math, builder
settings and mesh buffers. It has NO knowledge of the builders or the editor.
"""
