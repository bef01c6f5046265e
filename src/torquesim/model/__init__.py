"""
The MODEL layer contains pure data structures and the physics.
It has NO knowledge of the GUI (Qt) or the chart (pyqtgraph).
"""
