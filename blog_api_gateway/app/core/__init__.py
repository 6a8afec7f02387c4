"""
Core building blocks shared by every layer: settings, logging setup,
the error taxonomy and the reader/writer lock used by the stores.
"""
