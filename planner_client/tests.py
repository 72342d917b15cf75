"""
Test suite for the planner client
Tests: HTTP adapter against a live server, query cache invalidation and the in-memory demo planner
"""
from django.test import LiveServerTestCase, SimpleTestCase
from planner_client import APIError, LocalPlanner, NotAuthenticated, PlannerAPIClient, open_planner
from planner_client.cache import QueryCache, cache_key


class QueryCacheTests(SimpleTestCase):
    """Test cache keys and family invalidation"""

    def test_cache_key_sorts_params(self):
        self.assertEqual(cache_key('/guests/', {'side': 'both', 'rsvp': 'pending'}), 'guests?rsvp=pending&side=both')
        self.assertEqual(cache_key('guests'), 'guests')

    def test_invalidate_family(self):
        cache = QueryCache()
        cache.set('budget/items', [])
        cache.set('budget/summary', {})
        cache.set('budget/items?categoryId=abc', [])
        cache.set('guests', [])
        self.assertEqual(cache.invalidate('budget/categories/abc'), 3)
        self.assertNotIn('budget/items', cache)
        self.assertIn('guests', cache)


class PlannerAPIClientTests(LiveServerTestCase):
    """Test the HTTP adapter end to end against a running server"""

    def setUp(self):
        self.client_api = PlannerAPIClient(self.live_server_url)

    def tearDown(self):
        self.client_api.session.close()

    def test_requires_session(self):
        with self.assertRaises(NotAuthenticated) as context:
            self.client_api.current_user()
        self.assertEqual(context.exception.status_code, 401)
        self.assertEqual(context.exception.message, 'Unauthorized')

    def test_register_and_crud(self):
        user = self.client_api.register('alice', 'secret1')
        self.assertEqual(user['username'], 'alice')
        self.assertEqual(self.client_api.current_user()['id'], user['id'])

        self.assertEqual(self.client_api.list('guests'), [])
        guest = self.client_api.create('guests', {'name': 'Bob'})
        self.assertEqual(guest['rsvp'], 'pending')

        # Creating invalidated the cached empty list
        self.assertEqual([row['name'] for row in self.client_api.list('guests')], ['Bob'])

        updated = self.client_api.update('guests', guest['id'], {'rsvp': 'attending'})
        self.assertEqual(updated['rsvp'], 'attending')
        self.assertEqual(self.client_api.guest_summary()['attending'], 1)

        self.assertEqual(self.client_api.delete('guests', guest['id']), {'ok': True})
        with self.assertRaises(APIError) as context:
            self.client_api.delete('guests', guest['id'])
        self.assertEqual(context.exception.status_code, 404)
        self.assertEqual(context.exception.message, 'Guest not found')

    def test_login_and_logout(self):
        self.client_api.register('carol', 'secret1')
        self.client_api.logout()
        with self.assertRaises(NotAuthenticated):
            self.client_api.current_user()

        with self.assertRaises(NotAuthenticated) as context:
            self.client_api.login('carol', 'wrong-password')
        self.assertEqual(context.exception.message, 'Invalid username or password')

        self.assertEqual(self.client_api.login('carol', 'secret1')['username'], 'carol')
        self.assertEqual(self.client_api.set_budget(48000)['totalBudget'], 48000)

    def test_budget_flow(self):
        self.client_api.register('dave', 'secret1')
        self.assertEqual(self.client_api.get_budget(), {'totalBudget': 65000})
        self.client_api.set_budget(50000)
        self.assertEqual(self.client_api.get_budget()['totalBudget'], 50000)

        categories = self.client_api.create('budget/categories', [
            {'name': 'Venue', 'target': 30000, 'sortOrder': 0},
            {'name': 'Music', 'target': 6000, 'sortOrder': 1},
        ])
        venue = categories[0]
        self.client_api.create('budget/items', {'categoryId': venue['id'], 'name': 'Hall', 'cost': 31000})
        self.assertEqual(len(self.client_api.list('budget/items')), 1)
        self.assertEqual(self.client_api.budget_summary()['categories'][0]['status'], 'over')

        with self.assertRaises(APIError) as context:
            self.client_api.create('budget/items', {'categoryId': 'nonexistent', 'name': 'X', 'cost': 100})
        self.assertEqual(context.exception.status_code, 400)
        self.assertEqual(context.exception.message, 'Category not found')
        self.assertEqual(context.exception.field, 'categoryId')

        # Deleting the category drops cached item lists along with its items
        self.client_api.delete('budget/categories', venue['id'])
        self.assertNotIn('budget/items', self.client_api.cache)
        self.assertEqual(self.client_api.list('budget/items'), [])


class LocalPlannerTests(SimpleTestCase):
    """Test the in-memory demo planner"""

    def setUp(self):
        self.planner = LocalPlanner()

    def test_open_planner_selects_adapter(self):
        self.assertIsInstance(open_planner(demo=True), LocalPlanner)
        self.assertIsInstance(open_planner(), LocalPlanner)
        self.assertIsInstance(open_planner('http://localhost:8000'), PlannerAPIClient)

    def test_seeded_defaults(self):
        milestones = self.planner.list('milestones')
        self.assertEqual(len(milestones), 20)
        self.assertEqual([row['sortOrder'] for row in milestones], list(range(20)))
        self.assertEqual(len(self.planner.list('payments')), 4)
        self.assertEqual(len(self.planner.list('budget/categories')), 5)
        self.assertEqual(self.planner.get_budget(), {'totalBudget': 65000})

    def test_unseeded(self):
        self.assertEqual(LocalPlanner(seed=False).list('milestones'), [])

    def test_defaults_applied(self):
        guest = self.planner.create('guests', {'name': 'Alice'})
        self.assertEqual(guest['rsvp'], 'pending')
        self.assertEqual(guest['side'], 'both')
        task = self.planner.create('planning-tasks', {'name': 'Favors'})
        self.assertEqual(task['status'], 'not_started')
        vendor = self.planner.create('vendors', {'category': 'Florist'})
        self.assertEqual(vendor['status'], 'searching')

    def test_required_field(self):
        with self.assertRaises(APIError) as context:
            self.planner.create('guests', {'rsvp': 'attending'})
        self.assertEqual(context.exception.field, 'name')

    def test_invalid_choice_rejected(self):
        with self.assertRaises(APIError) as context:
            self.planner.create('guests', {'name': 'A', 'rsvp': 'bogus'})
        self.assertEqual(context.exception.status_code, 400)
        self.assertEqual(context.exception.field, 'rsvp')
        self.assertEqual(self.planner.list('guests'), [])

        task = self.planner.create('planning-tasks', {'name': 'Favors'})
        with self.assertRaises(APIError) as context:
            self.planner.update('planning-tasks', task['id'], {'assignee': 'mom'})
        self.assertEqual(context.exception.field, 'assignee')
        self.assertEqual(self.planner.get('planning-tasks', task['id'])['assignee'], 'self')

    def test_negative_target_rejected(self):
        with self.assertRaises(APIError) as context:
            self.planner.create('budget/categories', {'name': 'C', 'target': -5})
        self.assertEqual(context.exception.field, 'target')

    def test_integer_bounds(self):
        category = self.planner.create('budget/categories', {'name': 'C', 'target': 100})
        with self.assertRaises(APIError) as context:
            self.planner.create('budget/items', {'categoryId': category['id'], 'name': 'X', 'cost': 10 ** 20})
        self.assertEqual(context.exception.field, 'cost')
        with self.assertRaises(APIError) as context:
            self.planner.set_budget(10 ** 20)
        self.assertEqual(context.exception.field, 'totalBudget')

    def test_tags_must_be_list(self):
        with self.assertRaises(APIError) as context:
            self.planner.create('notes', {'tags': 'venue'})
        self.assertEqual(context.exception.field, 'tags')

    def test_partial_update_and_not_found(self):
        vendor = self.planner.create('vendors', {'category': 'Photo', 'phone': '555'})
        updated = self.planner.update('vendors', vendor['id'], {'status': 'booked'})
        self.assertEqual(updated['phone'], '555')
        self.planner.delete('vendors', vendor['id'])
        with self.assertRaises(APIError) as context:
            self.planner.delete('vendors', vendor['id'])
        self.assertEqual(context.exception.message, 'Vendor not found')

    def test_category_cascade(self):
        category = self.planner.create('budget/categories', {'name': 'Cake', 'target': 800})
        self.planner.create('budget/items', {'categoryId': category['id'], 'name': 'Tiered', 'cost': 900})
        self.assertEqual(len(self.planner.list('budget/items', categoryId=category['id'])), 1)
        self.planner.delete('budget/categories', category['id'])
        self.assertEqual(self.planner.list('budget/items'), [])

    def test_item_needs_existing_category(self):
        with self.assertRaises(APIError) as context:
            self.planner.create('budget/items', {'categoryId': 'nonexistent', 'name': 'X', 'cost': 100})
        self.assertEqual(context.exception.message, 'Category not found')

    def test_bulk_only_where_allowed(self):
        with self.assertRaises(APIError):
            self.planner.create('guests', [{'name': 'A'}])

    def test_budget_upsert(self):
        first = self.planner.set_budget(50000)
        second = self.planner.set_budget(70000)
        self.assertEqual(first['id'], second['id'])
        self.assertEqual(self.planner.budget_summary()['totalBudget'], 70000)

    def test_import_and_summary(self):
        self.planner.import_guests('Alice, yes\nBob, no\nCarol')
        self.planner.update('guests', self.planner.list('guests')[0]['id'], {'plusOne': True})
        self.assertEqual(self.planner.guest_summary(), {'invited': 4, 'attending': 1, 'declined': 1, 'pending': 1})
        with self.assertRaises(APIError):
            self.planner.import_guests('   ')
