"""Application composition layer for the Tkinter GUI.

Controllers in this package wire views, registers, repositories, and use
cases into runnable desktop workflows without placing business logic in views.
"""
