"""
Test suite for the notes module
Tests: CRUD, tag handling, update timestamps and ordering
"""
from datetime import timedelta
from django.test import TestCase
from django.utils import timezone
from rest_framework import status
from backend.core.test_utils import TestDataFactory, AuthenticatedAPIClient
from backend.notes.models import Note


class NoteAPITests(TestCase):
    """Test note API endpoints"""

    def setUp(self):
        self.user = TestDataFactory.create_user()
        self.client = AuthenticatedAPIClient()
        self.client.authenticate_user(self.user)

    def test_create_note_defaults(self):
        response = self.client.post('/api/notes', {}, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['title'], '')
        self.assertEqual(response.data['content'], '')
        self.assertEqual(response.data['tags'], [])
        self.assertIsNotNone(response.data['updatedAt'])

    def test_tags_deduplicated(self):
        response = self.client.post('/api/notes', {'title': 'Ideas', 'tags': ['venue', 'food', 'venue']}, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['tags'], ['venue', 'food'])

    def test_tags_must_be_list(self):
        response = self.client.post('/api/notes', {'tags': 'venue'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['field'], 'tags')

    def test_update_bumps_updated_at(self):
        """Editing a note refreshes its update time"""
        stale = timezone.now() - timedelta(days=1)
        note = TestDataFactory.create_note(self.user, title='Menu', updated_at=stale)
        response = self.client.patch(f'/api/notes/{note.pk}', {'content': 'Tasting on Friday'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        note.refresh_from_db()
        self.assertEqual(note.content, 'Tasting on Friday')
        self.assertGreater(note.updated_at, stale)

    def test_client_supplied_updated_at_on_update(self):
        note = TestDataFactory.create_note(self.user)
        stamp = timezone.now() - timedelta(hours=3)
        response = self.client.put(f'/api/notes/{note.pk}', {'updatedAt': stamp.isoformat()}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        note.refresh_from_db()
        self.assertEqual(note.updated_at, stamp)

    def test_list_most_recent_first(self):
        now = timezone.now()
        older = TestDataFactory.create_note(self.user, title='Older', updated_at=now - timedelta(days=2))
        newer = TestDataFactory.create_note(self.user, title='Newer', updated_at=now - timedelta(days=1))
        response = self.client.get('/api/notes')
        self.assertEqual([note['title'] for note in response.data], ['Newer', 'Older'])

        self.client.patch(f'/api/notes/{older.pk}', {'content': 'edited'}, format='json')
        response = self.client.get('/api/notes')
        self.assertEqual([note['id'] for note in response.data], [older.pk, newer.pk])

    def test_search(self):
        TestDataFactory.create_note(self.user, title='Venue ideas', content='Barn or vineyard')
        TestDataFactory.create_note(self.user, title='Music', content='Jazz trio')
        response = self.client.get('/api/notes', {'search': 'vineyard'})
        self.assertEqual([note['title'] for note in response.data], ['Venue ideas'])

    def test_delete_note(self):
        note = TestDataFactory.create_note(self.user)
        self.assertEqual(self.client.delete(f'/api/notes/{note.pk}').data, {'ok': True})
        self.assertFalse(Note.objects.filter(pk=note.pk).exists())
        response = self.client.delete(f'/api/notes/{note.pk}')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['message'], 'Note not found')

    def test_foreign_note_not_found(self):
        other = TestDataFactory.create_user()
        note = TestDataFactory.create_note(other, title='Private')
        response = self.client.get(f'/api/notes/{note.pk}')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        response = self.client.patch(f'/api/notes/{note.pk}', {'title': 'Mine now'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        note.refresh_from_db()
        self.assertEqual(note.title, 'Private')
