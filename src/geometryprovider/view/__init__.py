"""
The VIEW layer converts built meshes for preview rendering (PyVista).
"""
