"""QLC+ input profile format.

Import the parser and exporter from their modules; this package stays empty so
the channel model can load the channel codec without a circular import.
"""
