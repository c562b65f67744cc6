# sleeplog/core/repositories/csv_codec.py
"""
Flat-file persistence for the sleep log.

The file is a header line followed by one comma-delimited line per entry:

    date,hours,quality,screen,caffeine,note
    2024-03-01,7.50,8,2.00,150,late dinner

Notes are written with commas replaced by semicolons. Lines are parsed the
way a scanf pattern would read them: a number must be followed directly by
the next delimiter, and the note is whatever follows the sixth comma.
"""

import logging
import os
import re

from pydantic import ValidationError

from sleeplog.core.models.data_models import SleepEntry, StoreStatus
from sleeplog.core.models.output_models import LoadResult, SaveResult
from sleeplog.utils.constants import (
    CSV_HEADER, DEFAULT_LOG_FILE, DEFAULT_MALFORMED_POLICY, MALFORMED_POLICIES
)

logger = logging.getLogger(__name__)

_FLOAT = r'\s*([-+]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?|inf(?:inity)?|nan))'
_INT = r'\s*([-+]?\d+)'

LINE_PATTERN = re.compile(
    rf'(?P<date>[^,]+),{_FLOAT},{_INT},{_FLOAT},{_INT}(?:,(?P<note>.*))?',
    re.IGNORECASE,
)


def format_entry_line(entry):
    """Render one entry as a persisted line (without the trailing newline)"""
    note_safe = entry.note.replace(',', ';')
    return "%s,%.2f,%d,%.2f,%d,%s" % (
        entry.date, entry.hours, entry.quality, entry.screen, entry.caffeine, note_safe
    )


def parse_entry_line(line):
    """
    Parse one persisted line.
    
    Args:
        line: A data line, with or without its line terminator
        
    Returns:
        SleepEntry, or None when the date, hours, quality, screen and caffeine
        fields cannot all be read
    """
    match = LINE_PATTERN.match(line.rstrip('\r\n'))
    if match is None:
        return None
    date, hours, quality, screen, caffeine = match.group('date', 2, 3, 4, 5)
    try:
        return SleepEntry(
            date=date,
            hours=float(hours),
            quality=int(quality),
            screen=float(screen),
            caffeine=int(caffeine),
            note=match.group('note') or '',
        )
    except ValidationError as e:
        logger.debug(f"Rejected line {line!r}: {e}")
        return None


class SleepLogFile:
    """Reads and writes a SleepLog to a delimited text file"""
    
    def __init__(self, path=DEFAULT_LOG_FILE, on_malformed=DEFAULT_MALFORMED_POLICY):
        if on_malformed not in MALFORMED_POLICIES:
            raise ValueError(
                f"Invalid malformed-line policy {on_malformed!r}. "
                f"Must be one of: {', '.join(MALFORMED_POLICIES)}"
            )
        self.path = str(path)
        self.on_malformed = on_malformed
    
    def save(self, log):
        """Overwrite the file with a header and one line per entry"""
        entries = log.entries()
        try:
            with open(self.path, 'w', encoding='utf-8') as f:
                f.write(CSV_HEADER + '\n')
                for entry in entries:
                    f.write(format_entry_line(entry) + '\n')
        except OSError as e:
            logger.error(f"Error saving sleep log to {self.path}: {e}")
            return SaveResult(status=StoreStatus.IO_ERROR, path=self.path, error=str(e))
        
        logger.info(f"Saved {len(entries)} entries to {self.path}")
        return SaveResult(status=StoreStatus.OK, path=self.path, written=len(entries))
    
    def load(self, log):
        """
        Replace the log's content with the entries stored in the file.
        
        A missing file is the normal first-run state and leaves the log as it is,
        as does a file without a header line. With the 'stop' policy the first
        malformed data line ends the load and everything after it is ignored;
        with 'skip' malformed lines are passed over.
        
        Args:
            log: SleepLog to populate
            
        Returns:
            LoadResult: status, number of entries loaded and what was left out
        """
        if not os.path.exists(self.path):
            logger.info(f"No sleep log at {self.path}, starting empty")
            return LoadResult(status=StoreStatus.NOT_FOUND, path=self.path)
        
        try:
            with open(self.path, 'r', encoding='utf-8', errors='replace') as f:
                lines = f.readlines()
        except OSError as e:
            logger.error(f"Error reading sleep log {self.path}: {e}")
            return LoadResult(status=StoreStatus.IO_ERROR, path=self.path, error=str(e))
        
        # Header is skipped without validation
        if not lines:
            logger.info(f"Sleep log {self.path} has no header line, nothing loaded")
            return LoadResult(status=StoreStatus.OK, path=self.path)
        
        accepted = []
        stopped_at_line = None
        skipped_lines = []
        dropped = 0
        for line_no, line in enumerate(lines[1:], start=2):
            entry = parse_entry_line(line)
            full = len(accepted) >= log.capacity
            if entry is None:
                if full:
                    # Past capacity the line would never have been read
                    if self.on_malformed == 'stop':
                        break
                    continue
                if self.on_malformed == 'stop':
                    stopped_at_line = line_no
                    logger.warning(
                        f"Malformed line {line_no} in {self.path}, ignoring it and the rest of the file"
                    )
                    break
                skipped_lines.append(line_no)
                logger.warning(f"Skipping malformed line {line_no} in {self.path}")
                continue
            if full:
                dropped += 1
            else:
                accepted.append(entry)
        
        if dropped:
            logger.warning(
                f"Sleep log {self.path} holds more than {log.capacity} entries, "
                f"{dropped} not loaded"
            )
        
        loaded = log.replace_all(accepted)
        logger.info(f"Loaded {loaded} entries from {self.path}")
        return LoadResult(
            status=StoreStatus.OK,
            path=self.path,
            loaded=loaded,
            stopped_at_line=stopped_at_line,
            skipped_lines=skipped_lines,
            dropped_over_capacity=dropped,
        )
