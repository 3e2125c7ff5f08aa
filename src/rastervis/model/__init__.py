"""
The MODEL layer contains pure data structures and the rasterization algorithms.
It has NO knowledge of the GUI (Qt).
It deals with Geometry, Coordinate mapping and Parsing of user input.
"""
