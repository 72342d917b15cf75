"""
Pasted guest-list parsing.

Each non-empty line describes one guest. Lines containing a tab are split on
tabs (spreadsheet paste), anything else on commas::

    name, rsvp, side, table, dietary, notes...

Every column after the name is optional; columns past the fifth are joined
back together with ", " as notes, empty columns included.
"""

RSVP_ALIASES = {
    'attending': 'attending',
    'yes': 'attending',
    'confirmed': 'attending',
    'declined': 'declined',
    'no': 'declined',
    'pending': 'pending',
    'maybe': 'pending',
    'tbd': 'pending',
}

SIDE_ALIASES = {
    'partner1': 'partner1',
    'p1': 'partner1',
    'partner2': 'partner2',
    'p2': 'partner2',
    'both': 'both',
}


def split_guest_line(line):
    parts = line.split('\t') if '\t' in line else line.split(',')
    return [part.strip() for part in parts]


def parse_guest_line(line):
    """Return a guest payload for one line, or None when it has no name"""
    columns = split_guest_line(line.strip())
    columns += [''] * (5 - len(columns))
    name, rsvp, side, table, dietary = columns[:5]
    if not name:
        return None
    return {
        'name': name,
        'plusOne': False,
        'rsvp': RSVP_ALIASES.get(rsvp.lower(), 'pending'),
        'side': SIDE_ALIASES.get(side.lower(), 'both'),
        'table': table,
        'dietary': dietary,
        'notes': ', '.join(columns[5:]).strip(),
    }


def parse_guest_list(text):
    payloads = []
    for line in text.splitlines():
        if not line.strip():
            continue
        payload = parse_guest_line(line)
        if payload is not None:
            payloads.append(payload)
    return payloads
