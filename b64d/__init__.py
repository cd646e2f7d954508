R"""
The b64d package finds base64 encoded payloads embedded in arbitrary text and surfaces the ones
that decode to readable text. The command line interface is documented in `b64d.cli`; for use
within Python code, the package exports the `b64d.scan.Scanner` class and the
`b64d.lib.config.Configuration` it is driven by.

The pipeline consists of the following library modules, in order:

1. `b64d.lib.reader`: size-limited input and the bounded line reader
2. `b64d.lib.candidates`: base64 candidate extraction and length validation
3. `b64d.lib.decoder`: the ordered list of base64 decoding variants
4. `b64d.lib.printable`: the printable-ratio heuristic
5. `b64d.lib.reporter`: output of results and statistics
"""
from __future__ import annotations

__version__ = '0.1.0'
__distribution__ = 'b64d'

from b64d.lib.config import Configuration
from b64d.lib.reporter import Reporter, ScanStatistics
from b64d.scan import Scanner

__all__ = [
    'Configuration',
    'Reporter',
    'ScanStatistics',
    'Scanner',
]
