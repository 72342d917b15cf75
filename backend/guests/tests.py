"""
Test suite for the guests module
Tests: CRUD with ownership isolation, defaults, filters, pasted-list import and headcount summary
"""
from django.test import TestCase
from rest_framework import status
from backend.core.test_utils import TestDataFactory, AuthenticatedAPIClient
from backend.guests.importers import parse_guest_line, parse_guest_list
from backend.guests.models import Guest


class GuestImportParsingTests(TestCase):
    """Test pasted guest-list parsing"""

    def test_comma_separated_line(self):
        guest = parse_guest_line('Alice Smith, yes, p1, Table 4, Vegan')
        self.assertEqual(guest['name'], 'Alice Smith')
        self.assertEqual(guest['rsvp'], 'attending')
        self.assertEqual(guest['side'], 'partner1')
        self.assertEqual(guest['table'], 'Table 4')
        self.assertEqual(guest['dietary'], 'Vegan')
        self.assertEqual(guest['notes'], '')
        self.assertFalse(guest['plusOne'])

    def test_tab_separated_line_keeps_commas(self):
        """A tab-separated line is not split on commas"""
        guest = parse_guest_line('Smith, Bob\tno\tp2\t\t\tArrives late\tBrings kids')
        self.assertEqual(guest['name'], 'Smith, Bob')
        self.assertEqual(guest['rsvp'], 'declined')
        self.assertEqual(guest['side'], 'partner2')
        self.assertEqual(guest['notes'], 'Arrives late, Brings kids')

    def test_empty_note_columns_kept(self):
        """Blank columns between note parts survive the join"""
        self.assertEqual(parse_guest_line('A,,,,,x,,y')['notes'], 'x, , y')
        self.assertEqual(parse_guest_line('A, yes, p1, T1, Vegan, ')['notes'], '')

    def test_name_only_uses_defaults(self):
        guest = parse_guest_line('Carol')
        self.assertEqual(guest['rsvp'], 'pending')
        self.assertEqual(guest['side'], 'both')
        self.assertEqual(guest['table'], '')

    def test_aliases_are_case_insensitive(self):
        self.assertEqual(parse_guest_line('Dan, CONFIRMED')['rsvp'], 'attending')
        self.assertEqual(parse_guest_line('Dan, Maybe')['rsvp'], 'pending')
        self.assertEqual(parse_guest_line('Dan, TBD')['rsvp'], 'pending')
        self.assertEqual(parse_guest_line('Dan, , Partner2')['side'], 'partner2')

    def test_unknown_values_fall_back(self):
        guest = parse_guest_line('Eve, perhaps, groom')
        self.assertEqual(guest['rsvp'], 'pending')
        self.assertEqual(guest['side'], 'both')

    def test_blank_and_nameless_lines_skipped(self):
        payloads = parse_guest_list('Alice\n\n   \n, yes, p1\nBob\n')
        self.assertEqual([payload['name'] for payload in payloads], ['Alice', 'Bob'])


class GuestAPITests(TestCase):
    """Test guest API endpoints"""

    def setUp(self):
        self.user = TestDataFactory.create_user()
        self.client = AuthenticatedAPIClient()
        self.client.authenticate_user(self.user)

    def test_create_guest_defaults(self):
        """Only a name is required; the rest take their initial values"""
        response = self.client.post('/api/guests', {'name': 'Alice'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['name'], 'Alice')
        self.assertEqual(response.data['rsvp'], 'pending')
        self.assertEqual(response.data['side'], 'both')
        self.assertFalse(response.data['plusOne'])
        self.assertEqual(response.data['dietary'], '')
        self.assertEqual(response.data['table'], '')
        self.assertEqual(response.data['ownerId'], self.user.pk)

        response = self.client.get('/api/guests')
        self.assertEqual(len(response.data), 1)
        self.assertEqual(response.data[0]['rsvp'], 'pending')

    def test_create_guest_ignores_owner_in_payload(self):
        other = TestDataFactory.create_user()
        response = self.client.post('/api/guests', {'name': 'Alice', 'ownerId': other.pk}, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(Guest.objects.get(pk=response.data['id']).owner, self.user)

    def test_create_guest_invalid_rsvp(self):
        response = self.client.post('/api/guests', {'name': 'Alice', 'rsvp': 'sure'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['field'], 'rsvp')

    def test_create_guest_rejects_array(self):
        response = self.client.post('/api/guests', [{'name': 'Alice'}], format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(Guest.objects.count(), 0)

    def test_list_in_creation_order(self):
        first = TestDataFactory.create_guest(self.user, name='First')
        second = TestDataFactory.create_guest(self.user, name='Second')
        response = self.client.get('/api/guests')
        self.assertEqual([guest['id'] for guest in response.data], [first.pk, second.pk])

    def test_update_guest_partial(self):
        guest = TestDataFactory.create_guest(self.user, name='Alice', dietary='Vegan')
        response = self.client.put(f'/api/guests/{guest.pk}', {'rsvp': 'attending', 'table': 'T1'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['rsvp'], 'attending')
        self.assertEqual(response.data['table'], 'T1')
        self.assertEqual(response.data['dietary'], 'Vegan')
        self.assertEqual(response.data['name'], 'Alice')

    def test_patch_guest(self):
        guest = TestDataFactory.create_guest(self.user)
        response = self.client.patch(f'/api/guests/{guest.pk}', {'plusOne': True}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data['plusOne'])

    def test_update_missing_guest(self):
        response = self.client.put('/api/guests/does-not-exist', {'name': 'X'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['message'], 'Guest not found')

    def test_delete_guest_twice(self):
        guest = TestDataFactory.create_guest(self.user)
        response = self.client.delete(f'/api/guests/{guest.pk}')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, {'ok': True})
        response = self.client.delete(f'/api/guests/{guest.pk}')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['message'], 'Guest not found')

    def test_filters(self):
        TestDataFactory.create_guest(self.user, name='Alice', rsvp='attending', side='partner1')
        TestDataFactory.create_guest(self.user, name='Bob', rsvp='declined', side='partner2', notes='cousin')
        response = self.client.get('/api/guests', {'rsvp': 'attending'})
        self.assertEqual([guest['name'] for guest in response.data], ['Alice'])
        response = self.client.get('/api/guests', {'side': 'partner2'})
        self.assertEqual([guest['name'] for guest in response.data], ['Bob'])
        response = self.client.get('/api/guests', {'search': 'COUSIN'})
        self.assertEqual([guest['name'] for guest in response.data], ['Bob'])

    def test_invalid_filter_value(self):
        response = self.client.get('/api/guests', {'rsvp': 'sure'})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['field'], 'rsvp')


class GuestOwnershipTests(TestCase):
    """Records of one user are invisible to everyone else"""

    def setUp(self):
        self.owner = TestDataFactory.create_user()
        self.intruder = TestDataFactory.create_user()
        self.guest = TestDataFactory.create_guest(self.owner, name='Alice')
        self.client = AuthenticatedAPIClient()
        self.client.authenticate_user(self.intruder)

    def test_list_excludes_foreign_records(self):
        response = self.client.get('/api/guests')
        self.assertEqual(response.data, [])

    def test_foreign_record_looks_missing(self):
        url = f'/api/guests/{self.guest.pk}'
        for response in [
            self.client.get(url),
            self.client.put(url, {'name': 'Hacked'}, format='json'),
            self.client.patch(url, {'name': 'Hacked'}, format='json'),
            self.client.delete(url),
        ]:
            self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
            self.assertEqual(response.data['message'], 'Guest not found')

        self.guest.refresh_from_db()
        self.assertEqual(self.guest.name, 'Alice')

    def test_summary_counts_only_own_guests(self):
        response = self.client.get('/api/guests/summary')
        self.assertEqual(response.data['invited'], 0)


class GuestImportAPITests(TestCase):
    """Test the pasted guest-list import endpoint"""

    def setUp(self):
        self.user = TestDataFactory.create_user()
        self.client = AuthenticatedAPIClient()
        self.client.authenticate_user(self.user)

    def test_import_creates_guests(self):
        text = 'Alice, yes, p1, Table 1, Vegan\nBob\tno\tp2\t\t\tComing late\n\n, nobody\n'
        response = self.client.post('/api/guests/import', {'text': text}, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(len(response.data), 2)
        alice, bob = response.data
        self.assertEqual(alice['rsvp'], 'attending')
        self.assertEqual(alice['table'], 'Table 1')
        self.assertEqual(bob['side'], 'partner2')
        self.assertEqual(bob['notes'], 'Coming late')
        self.assertEqual(Guest.objects.filter(owner=self.user).count(), 2)

    def test_import_nothing_parsed(self):
        response = self.client.post('/api/guests/import', {'text': '\n  \n'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['message'], 'No guests found in pasted text')

    def test_import_missing_text(self):
        response = self.client.post('/api/guests/import', {}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['field'], 'text')


class GuestSummaryTests(TestCase):
    """Test headcount totals"""

    def setUp(self):
        self.user = TestDataFactory.create_user()
        self.client = AuthenticatedAPIClient()
        self.client.authenticate_user(self.user)

    def test_summary(self):
        TestDataFactory.create_guest(self.user, rsvp='attending', plus_one=True)
        TestDataFactory.create_guest(self.user, rsvp='attending')
        TestDataFactory.create_guest(self.user, rsvp='declined')
        TestDataFactory.create_guest(self.user, rsvp='pending', plus_one=True)
        response = self.client.get('/api/guests/summary')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, {'invited': 6, 'attending': 2, 'declined': 1, 'pending': 1})

    def test_empty_summary(self):
        response = self.client.get('/api/guests/summary')
        self.assertEqual(response.data, {'invited': 0, 'attending': 0, 'declined': 0, 'pending': 0})
