"""
Command Line Interface Package

Command-line access to the amount codec.

Command Structure:
- monval: Main entry point with utility commands (version, config)
- monval parse / format: Text to minor units and back
- monval convert: Float, decimal or whole-unit values to minor units
- monval convert-csv: Bulk parsing of a CSV column
"""
