"""Classic algorithms and data structures: sorting, expressions, numbers, matrices, files, containers, linked lists, trees and graphs."""

__version__ = "0.1.0"