"""
In-memory planner used in demo mode.

Exposes the same calls as ``PlannerAPIClient`` and applies the same defaults,
field validation (required fields, choices, integer bounds),
ordering and not-found behaviour, but keeps everything in process for a
single local user. Nothing is persisted.
"""
import copy
import uuid
from collections import namedtuple
from datetime import datetime, timezone
from types import SimpleNamespace

from backend.budget.defaults import default_category_rows
from backend.budget.summary import summarize_budget
from backend.guests.importers import parse_guest_list
from backend.planning.defaults import default_milestone_rows, default_payment_rows

from .errors import APIError

DEFAULT_TOTAL_BUDGET = 65000

MAX_INTEGER = 2147483647
MIN_INTEGER = -2147483648

Resource = namedtuple(
    'Resource', ['label', 'required', 'defaults', 'ordering', 'bulk', 'choices', 'integers', 'lists'],
    defaults=({}, {}, ()),
)

RSVP_CHOICES = ('pending', 'attending', 'declined')
SIDE_CHOICES = ('partner1', 'partner2', 'both')
VENDOR_STATUS_CHOICES = ('searching', 'contacted', 'quoted', 'booked')
ASSIGNEE_CHOICES = ('self', 'partner', 'planner')
TASK_STATUS_CHOICES = ('not_started', 'in_progress', 'done')

RESOURCES = {
    'guests': Resource(
        'Guest', ('name',),
        {'plusOne': False, 'rsvp': 'pending', 'dietary': '', 'table': '', 'side': 'both', 'notes': ''},
        'created', False,
        choices={'rsvp': RSVP_CHOICES, 'side': SIDE_CHOICES},
    ),
    'vendors': Resource(
        'Vendor', ('category',),
        {
            'vendorName': '', 'contactName': '', 'email': '', 'phone': '', 'status': 'searching',
            'depositAmount': '', 'depositDue': '', 'finalAmount': '', 'finalDue': '', 'notes': '',
        },
        'created', False,
        choices={'status': VENDOR_STATUS_CHOICES},
    ),
    'notes': Resource('Note', (), {'title': '', 'content': '', 'tags': []}, 'updated', False, lists=('tags',)),
    'milestones': Resource(
        'Milestone', ('label', 'timeframe'), {'done': False, 'targetDate': None, 'sortOrder': 0}, 'sort', True,
        integers={'sortOrder': MIN_INTEGER},
    ),
    'planning-tasks': Resource(
        'Planning task', ('name',),
        {'category': 'General', 'dueDate': '', 'assignee': 'self', 'status': 'not_started'},
        'created', False,
        choices={'assignee': ASSIGNEE_CHOICES, 'status': TASK_STATUS_CHOICES},
    ),
    'payments': Resource(
        'Payment', ('date', 'label', 'amount'), {'paid': False, 'sortOrder': 0}, 'sort', True,
        integers={'sortOrder': MIN_INTEGER},
    ),
    'budget/categories': Resource(
        'Category', ('name',), {'target': 0, 'sortOrder': 0}, 'sort', True,
        integers={'target': 0, 'sortOrder': MIN_INTEGER},
    ),
    'budget/items': Resource(
        'Budget item', ('categoryId', 'name'), {'cost': 0, 'paid': False}, 'created', False,
        integers={'cost': 0},
    ),
}

LOCAL_USER = {'id': 'local', 'username': 'demo', 'dateJoined': None}


def _now():
    return datetime.now(timezone.utc).isoformat()


def _check_integer(field, value, minimum):
    if isinstance(value, bool) or not isinstance(value, int):
        raise APIError(400, 'A valid integer is required.', field)
    if value < minimum:
        raise APIError(400, f'Ensure this value is greater than or equal to {minimum}.', field)
    if value > MAX_INTEGER:
        raise APIError(400, f'Ensure this value is less than or equal to {MAX_INTEGER}.', field)


def _camel_rows(rows):
    return [{'sortOrder' if key == 'sort_order' else key: value for key, value in row.items()} for row in rows]


class LocalPlanner:
    """Drop-in replacement for ``PlannerAPIClient`` backed by dictionaries"""

    def __init__(self, seed=True):
        self._tables = {resource: {} for resource in RESOURCES}
        self._sequence = 0
        self._budget = None
        if seed:
            self.create('milestones', _camel_rows(default_milestone_rows()))
            self.create('payments', _camel_rows(default_payment_rows()))
            self.create('budget/categories', _camel_rows(default_category_rows()))

    def _resource(self, resource):
        resource = resource.strip('/')
        if resource not in RESOURCES:
            raise APIError(404, f'Unknown resource {resource}')
        return resource, RESOURCES[resource]

    def _sorted(self, resource, records):
        ordering = RESOURCES[resource].ordering
        if ordering == 'sort':
            return sorted(records, key=lambda record: (record['sortOrder'], record['_seq']))
        if ordering == 'updated':
            return sorted(records, key=lambda record: (record['updatedAt'], record['_seq']), reverse=True)
        return sorted(records, key=lambda record: record['_seq'])

    @staticmethod
    def _public(record):
        return {key: copy.deepcopy(value) for key, value in record.items() if key != '_seq'}

    def _check(self, resource, payload, partial=False):
        entry = RESOURCES[resource]
        if not isinstance(payload, dict):
            raise APIError(400, f'{entry.label} payload must be an object')
        if not partial:
            for field in entry.required:
                if payload.get(field) in (None, ''):
                    raise APIError(400, 'This field is required.', field)
        for field, allowed in entry.choices.items():
            if field in payload and payload[field] not in allowed:
                raise APIError(400, f'"{payload[field]}" is not a valid choice.', field)
        for field, minimum in entry.integers.items():
            if field in payload:
                _check_integer(field, payload[field], minimum)
        for field in entry.lists:
            if field in payload and not isinstance(payload[field], list):
                raise APIError(400, f'Expected a list of items but got type "{type(payload[field]).__name__}".', field)
        if resource == 'budget/items' and 'categoryId' in payload:
            if payload['categoryId'] not in self._tables['budget/categories']:
                raise APIError(400, 'Category not found', 'categoryId')

    def _build(self, resource, payload):
        entry = RESOURCES[resource]
        self._sequence += 1
        stamp = _now()
        record = dict(copy.deepcopy(entry.defaults))
        record.update({key: copy.deepcopy(value) for key, value in payload.items() if key not in ('id', 'ownerId')})
        record.update({'id': str(uuid.uuid4()), 'ownerId': LOCAL_USER['id'], 'createdAt': stamp, '_seq': self._sequence})
        if resource == 'notes':
            record['tags'] = list(dict.fromkeys(record['tags']))
            record['updatedAt'] = stamp
        return record

    # Session

    def register(self, username, password):
        return dict(LOCAL_USER, username=username)

    def login(self, username, password):
        return dict(LOCAL_USER, username=username)

    def logout(self):
        return None

    def current_user(self):
        return dict(LOCAL_USER)

    # Generic resources

    def list(self, resource, **filters):
        resource, _ = self._resource(resource)
        records = list(self._tables[resource].values())
        search = filters.pop('search', None)
        for field, value in filters.items():
            records = [record for record in records if str(record.get(field, '')).lower() == str(value).lower()]
        if search:
            needle = search.lower()
            records = [
                record for record in records
                if any(isinstance(value, str) and needle in value.lower() for value in record.values())
            ]
        return [self._public(record) for record in self._sorted(resource, records)]

    def get(self, resource, pk):
        resource, entry = self._resource(resource)
        record = self._tables[resource].get(pk)
        if record is None:
            raise APIError(404, f'{entry.label} not found')
        return self._public(record)

    def create(self, resource, payload):
        resource, entry = self._resource(resource)
        if isinstance(payload, list):
            if not entry.bulk:
                raise APIError(400, f'{entry.label} payload must be an object')
            for row in payload:
                self._check(resource, row)
            records = [self._build(resource, row) for row in payload]
        else:
            self._check(resource, payload)
            records = [self._build(resource, payload)]
        for record in records:
            self._tables[resource][record['id']] = record
        created = [self._public(record) for record in records]
        return created if isinstance(payload, list) else created[0]

    def update(self, resource, pk, changes):
        resource, entry = self._resource(resource)
        self._check(resource, changes, partial=True)
        record = self._tables[resource].get(pk)
        if record is None:
            raise APIError(404, f'{entry.label} not found')
        record.update({key: copy.deepcopy(value) for key, value in changes.items() if key not in ('id', 'ownerId', 'createdAt')})
        if resource == 'notes' and 'updatedAt' not in changes:
            record['updatedAt'] = _now()
        return self._public(record)

    def delete(self, resource, pk):
        resource, entry = self._resource(resource)
        if self._tables[resource].pop(pk, None) is None:
            raise APIError(404, f'{entry.label} not found')
        if resource == 'budget/categories':
            items = self._tables['budget/items']
            for item_id in [key for key, item in items.items() if item['categoryId'] == pk]:
                del items[item_id]
        return {'ok': True}

    # Budget and guest helpers

    def get_budget(self):
        if self._budget is None:
            return {'totalBudget': DEFAULT_TOTAL_BUDGET}
        return dict(self._budget)

    def set_budget(self, total_budget):
        _check_integer('totalBudget', total_budget, 0)
        if self._budget is None:
            self._budget = {'id': str(uuid.uuid4()), 'ownerId': LOCAL_USER['id']}
        self._budget.update({'totalBudget': total_budget, 'updatedAt': _now()})
        return dict(self._budget)

    def budget_summary(self):
        categories = [
            SimpleNamespace(pk=record['id'], name=record['name'], target=record['target'])
            for record in self._sorted('budget/categories', self._tables['budget/categories'].values())
        ]
        items = [
            SimpleNamespace(category_id=record['categoryId'], cost=record['cost'], paid=record['paid'])
            for record in self._tables['budget/items'].values()
        ]
        return summarize_budget(self.get_budget()['totalBudget'], categories, items)

    def guest_summary(self):
        guests = self._tables['guests'].values()
        return {
            'invited': sum(2 if guest['plusOne'] else 1 for guest in guests),
            'attending': sum(1 for guest in guests if guest['rsvp'] == 'attending'),
            'declined': sum(1 for guest in guests if guest['rsvp'] == 'declined'),
            'pending': sum(1 for guest in guests if guest['rsvp'] == 'pending'),
        }

    def import_guests(self, text):
        payloads = parse_guest_list(text)
        if not payloads:
            raise APIError(400, 'No guests found in pasted text')
        records = [self._build('guests', payload) for payload in payloads]
        for record in records:
            self._tables['guests'][record['id']] = record
        return [self._public(record) for record in records]
