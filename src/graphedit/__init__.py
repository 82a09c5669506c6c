"""graphedit — node-and-edge graph editor with shortest-path queries."""

__version__ = "0.1.0"
