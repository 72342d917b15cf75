"""
Test suite for the core module
Tests: registration, login/logout, session enforcement, error bodies and the owner-scoped repository
"""
from django.contrib.auth import get_user_model
from django.test import TestCase
from rest_framework import status
from rest_framework.test import APIClient
from backend.core.repository import OwnedRepository, SingletonRepository
from backend.core.test_utils import TestDataFactory, AuthenticatedAPIClient
from backend.core.utils import first_error, describe_field
from backend.guests.models import Guest
from backend.budget.models import Budget

User = get_user_model()


class SessionAPITests(TestCase):
    """Test register, login, logout and current user endpoints"""

    def setUp(self):
        self.client = APIClient()

    def test_register_starts_session(self):
        """Registering returns the user and leaves the client logged in"""
        response = self.client.post('/api/register', {'username': 'alice', 'password': 'secret1'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['username'], 'alice')
        self.assertIn('id', response.data)
        self.assertIn('dateJoined', response.data)
        self.assertNotIn('password', response.data)

        response = self.client.get('/api/user')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['username'], 'alice')

    def test_register_duplicate_username(self):
        """A taken username is rejected with 400"""
        TestDataFactory.create_user(username='alice')
        response = self.client.post('/api/register', {'username': 'alice', 'password': 'secret1'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['message'], 'Username already taken')
        self.assertEqual(User.objects.filter(username='alice').count(), 1)

    def test_register_short_password(self):
        """Password validators run on registration"""
        response = self.client.post('/api/register', {'username': 'bob', 'password': 'abc'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['field'], 'password')
        self.assertFalse(User.objects.filter(username='bob').exists())

    def test_register_missing_username(self):
        """Missing username is a validation error"""
        response = self.client.post('/api/register', {'password': 'secret1'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['field'], 'username')

    def test_login_success(self):
        """Valid credentials log the user in"""
        TestDataFactory.create_user(username='carol', password='secret1')
        response = self.client.post('/api/login', {'username': 'carol', 'password': 'secret1'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['username'], 'carol')
        self.assertEqual(self.client.get('/api/user').status_code, status.HTTP_200_OK)

    def test_login_wrong_password(self):
        """Bad credentials yield 401 with a message"""
        TestDataFactory.create_user(username='carol', password='secret1')
        response = self.client.post('/api/login', {'username': 'carol', 'password': 'wrong'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data['message'], 'Invalid username or password')

    def test_logout_ends_session(self):
        """After logout the session no longer authenticates"""
        TestDataFactory.create_user(username='dave', password='secret1')
        self.client.post('/api/login', {'username': 'dave', 'password': 'secret1'}, format='json')
        response = self.client.post('/api/logout')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, {'ok': True})
        self.assertEqual(self.client.get('/api/user').status_code, status.HTTP_401_UNAUTHORIZED)

    def test_logout_without_session(self):
        """Logout succeeds even when nobody is logged in"""
        response = self.client.post('/api/logout')
        self.assertEqual(response.status_code, status.HTTP_200_OK)


class UnauthorizedAccessTests(TestCase):
    """Every data endpoint requires a session"""

    def setUp(self):
        self.client = APIClient()

    def test_current_user_requires_session(self):
        response = self.client.get('/api/user')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data, {'message': 'Unauthorized'})

    def test_resource_endpoints_require_session(self):
        """List and detail routes answer 401 Unauthorized without a session"""
        paths = [
            '/api/guests', '/api/vendors', '/api/notes', '/api/milestones',
            '/api/planning-tasks', '/api/payments', '/api/budget',
            '/api/budget/categories', '/api/budget/items', '/api/guests/summary',
            '/api/budget/summary',
        ]
        for path in paths:
            response = self.client.get(path)
            self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED, path)
            self.assertEqual(response.data['message'], 'Unauthorized', path)

    def test_mutations_require_session(self):
        response = self.client.post('/api/guests', {'name': 'Ghost'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(Guest.objects.count(), 0)

        response = self.client.delete('/api/guests/some-id')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)


class ErrorBodyTests(TestCase):
    """Error responses always carry a message"""

    def setUp(self):
        self.user = TestDataFactory.create_user()
        self.client = AuthenticatedAPIClient()
        self.client.authenticate_user(self.user)

    def test_validation_error_names_field(self):
        response = self.client.post('/api/guests', {}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['field'], 'name')
        self.assertIn('message', response.data)
        self.assertIn('name', response.data['errors'])

    def test_method_not_allowed_has_message(self):
        response = self.client.delete('/api/guests')
        self.assertEqual(response.status_code, status.HTTP_405_METHOD_NOT_ALLOWED)
        self.assertIn('message', response.data)

    def test_malformed_json_has_message(self):
        response = self.client.generic('POST', '/api/guests', '{not json', content_type='application/json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('message', response.data)


class ErrorHelperTests(TestCase):
    """Test the error flattening helpers"""

    def test_first_error_on_field_dict(self):
        self.assertEqual(first_error({'name': ['This field is required.']}), (('name',), 'This field is required.'))

    def test_first_error_skips_valid_list_entries(self):
        errors = [{}, {}, {'label': ['This field is required.']}]
        self.assertEqual(first_error(errors), ((2, 'label'), 'This field is required.'))

    def test_first_error_empty(self):
        self.assertIsNone(first_error({}))

    def test_describe_field(self):
        self.assertEqual(describe_field((3, 'label')), '3.label')
        self.assertIsNone(describe_field(('non_field_errors',)))


class OwnedRepositoryTests(TestCase):
    """Test the owner-scoped storage operations directly"""

    def setUp(self):
        self.repository = OwnedRepository(Guest)
        self.owner = TestDataFactory.create_user()
        self.other = TestDataFactory.create_user()

    def test_create_assigns_owner_and_id(self):
        guest = self.repository.create(self.owner, {'name': 'Alice'})
        self.assertEqual(guest.owner, self.owner)
        self.assertTrue(guest.pk)
        self.assertEqual(guest.rsvp, 'pending')

    def test_list_only_returns_owned_records(self):
        self.repository.create(self.owner, {'name': 'Alice'})
        self.repository.create(self.other, {'name': 'Mallory'})
        names = [guest.name for guest in self.repository.list_for_owner(self.owner)]
        self.assertEqual(names, ['Alice'])

    def test_update_merges_fields(self):
        guest = self.repository.create(self.owner, {'name': 'Alice', 'dietary': 'Vegan'})
        updated = self.repository.update(guest.pk, self.owner, {'rsvp': 'attending'})
        self.assertEqual(updated.rsvp, 'attending')
        self.assertEqual(updated.dietary, 'Vegan')
        guest.refresh_from_db()
        self.assertEqual(guest.rsvp, 'attending')

    def test_update_foreign_record_returns_none(self):
        guest = self.repository.create(self.owner, {'name': 'Alice'})
        self.assertIsNone(self.repository.update(guest.pk, self.other, {'name': 'Hacked'}))
        guest.refresh_from_db()
        self.assertEqual(guest.name, 'Alice')

    def test_delete_reports_absence(self):
        guest = self.repository.create(self.owner, {'name': 'Alice'})
        self.assertFalse(self.repository.delete(guest.pk, self.other))
        self.assertTrue(self.repository.delete(guest.pk, self.owner))
        self.assertFalse(self.repository.delete(guest.pk, self.owner))

    def test_create_many_is_atomic(self):
        records = self.repository.create_many(self.owner, [{'name': 'A'}, {'name': 'B'}])
        self.assertEqual(len(records), 2)
        self.assertEqual(self.repository.list_for_owner(self.owner).count(), 2)


class SingletonRepositoryTests(TestCase):
    """Test upsert semantics for one-per-owner records"""

    def setUp(self):
        self.repository = SingletonRepository(Budget, 'total_budget')
        self.owner = TestDataFactory.create_user()

    def test_get_missing(self):
        self.assertIsNone(self.repository.get(self.owner))

    def test_upsert_creates_then_updates(self):
        first = self.repository.upsert(self.owner, 50000)
        second = self.repository.upsert(self.owner, 70000)
        self.assertEqual(first.pk, second.pk)
        self.assertEqual(second.total_budget, 70000)
        self.assertGreaterEqual(second.updated_at, first.updated_at)
        self.assertEqual(Budget.objects.filter(owner=self.owner).count(), 1)


class AccountDeletionTests(TestCase):
    """Removing a user removes everything the user owns"""

    def test_user_delete_cascades(self):
        user = TestDataFactory.create_user()
        TestDataFactory.create_guest(user)
        TestDataFactory.create_budget_item(user)
        TestDataFactory.create_budget(user)
        user.delete()
        self.assertEqual(Guest.objects.count(), 0)
        self.assertEqual(Budget.objects.count(), 0)
