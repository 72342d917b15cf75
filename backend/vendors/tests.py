"""
Test suite for the vendors module
Tests: CRUD, partial updates, filters and ownership isolation
"""
from django.test import TestCase
from rest_framework import status
from backend.core.test_utils import TestDataFactory, AuthenticatedAPIClient
from backend.vendors.models import Vendor


class VendorAPITests(TestCase):
    """Test vendor API endpoints"""

    def setUp(self):
        self.user = TestDataFactory.create_user()
        self.client = AuthenticatedAPIClient()
        self.client.authenticate_user(self.user)

    def test_create_vendor_defaults(self):
        response = self.client.post('/api/vendors', {'category': 'Florist'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['status'], 'searching')
        self.assertEqual(response.data['vendorName'], '')
        self.assertEqual(response.data['depositAmount'], '')
        self.assertEqual(response.data['notes'], '')

    def test_create_vendor_requires_category(self):
        response = self.client.post('/api/vendors', {'vendorName': 'Bloom & Co'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['field'], 'category')

    def test_create_vendor_all_fields(self):
        data = {
            'category': 'Photography',
            'vendorName': 'Snap Studio',
            'contactName': 'Jo',
            'email': 'jo@snap.example',
            'phone': '555-0100',
            'status': 'quoted',
            'depositAmount': '$1,500',
            'depositDue': 'Mar 15',
            'finalAmount': '$6,500',
            'finalDue': 'Jun 01',
            'notes': 'Includes engagement shoot',
        }
        response = self.client.post('/api/vendors', data, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        for key, value in data.items():
            self.assertEqual(response.data[key], value, key)

    def test_partial_update_keeps_other_fields(self):
        """Updating status leaves every other field untouched"""
        vendor = TestDataFactory.create_vendor(self.user, vendor_name='Snap Studio', phone='555-0100')
        response = self.client.put(f'/api/vendors/{vendor.pk}', {'status': 'booked'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['status'], 'booked')
        self.assertEqual(response.data['vendorName'], 'Snap Studio')
        self.assertEqual(response.data['phone'], '555-0100')
        vendor.refresh_from_db()
        self.assertEqual(vendor.status, 'booked')

    def test_invalid_status(self):
        vendor = TestDataFactory.create_vendor(self.user)
        response = self.client.patch(f'/api/vendors/{vendor.pk}', {'status': 'hired'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['field'], 'status')

    def test_invalid_payload_for_missing_vendor(self):
        """Payload validation runs before the lookup"""
        response = self.client.put('/api/vendors/missing', {'status': 'hired'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_filters(self):
        TestDataFactory.create_vendor(self.user, category='Florist', status='booked')
        TestDataFactory.create_vendor(self.user, category='Catering')
        response = self.client.get('/api/vendors', {'status': 'booked'})
        self.assertEqual([vendor['category'] for vendor in response.data], ['Florist'])
        response = self.client.get('/api/vendors', {'category': 'catering'})
        self.assertEqual([vendor['category'] for vendor in response.data], ['Catering'])

    def test_delete_vendor(self):
        vendor = TestDataFactory.create_vendor(self.user)
        response = self.client.delete(f'/api/vendors/{vendor.pk}')
        self.assertEqual(response.data, {'ok': True})
        self.assertFalse(Vendor.objects.filter(pk=vendor.pk).exists())
        response = self.client.get(f'/api/vendors/{vendor.pk}')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['message'], 'Vendor not found')

    def test_foreign_vendor_not_found(self):
        other = TestDataFactory.create_user()
        vendor = TestDataFactory.create_vendor(other)
        response = self.client.put(f'/api/vendors/{vendor.pk}', {'status': 'booked'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        response = self.client.delete(f'/api/vendors/{vendor.pk}')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        vendor.refresh_from_db()
        self.assertEqual(vendor.status, 'searching')
        self.assertEqual(self.client.get('/api/vendors').data, [])
