"""
image_date_renamer
==================

Rename a folder of images to collision-free YYYYMMDD_nn names, with content
hash checks before and after.
"""

__all__ = [
	"cli",
	"config",
	"integrity",
	"organizer",
	"renamer",
	"scanner",
	"sequencer",
]
