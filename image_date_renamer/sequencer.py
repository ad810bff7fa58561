#!/usr/bin/env python3
"""
Date-sequenced target names.
"""

# Standard Library
import datetime

NAME_LIMIT = 99
DATE_FORMAT = "%Y%m%d"

#============================================


def generate_names(count: int, start_date: datetime.date) -> list[str]:
	"""
	Build the ordered list of target base names.

	Each date holds at most NAME_LIMIT names; the date advances by one day
	after every full block, and the last block is cut to the remainder.

	Args:
		count: Number of names to produce.
		start_date: Date of the first block, captured once by the caller.

	Returns:
		List of names like 20200614_01, exactly count long.
	"""
	if count < 0:
		raise ValueError(f"count must be non-negative, got {count}")
	full_days, remainder = divmod(count, NAME_LIMIT)
	total_days = full_days + (1 if remainder else 0)
	width = len(str(NAME_LIMIT))
	names: list[str] = []
	for day in range(total_days):
		stamp = (start_date + datetime.timedelta(days=day)).strftime(DATE_FORMAT)
		last_day = day == total_days - 1
		block = remainder if (last_day and remainder) else NAME_LIMIT
		for number in range(1, block + 1):
			names.append(f"{stamp}_{number:0{width}d}")
	return names
