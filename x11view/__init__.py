"""
x11view package
---------------
Canvas backends: a double-buffered X11 window canvas and an SVG canvas with
the same drawing methods.
"""
