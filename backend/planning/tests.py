"""
Test suite for the planning module
Tests: milestone checklist, planning tasks and payment timeline endpoints
"""
from django.test import TestCase
from rest_framework import status
from backend.core.test_utils import TestDataFactory, AuthenticatedAPIClient
from backend.planning.defaults import DEFAULT_MILESTONES, default_milestone_rows, default_payment_rows
from backend.planning.models import Milestone, Payment


class MilestoneAPITests(TestCase):
    """Test milestone API endpoints"""

    def setUp(self):
        self.user = TestDataFactory.create_user()
        self.client = AuthenticatedAPIClient()
        self.client.authenticate_user(self.user)

    def test_create_single_milestone(self):
        response = self.client.post('/api/milestones', {'label': 'Book venue', 'timeframe': '12+ months'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertFalse(response.data['done'])
        self.assertIsNone(response.data['targetDate'])
        self.assertEqual(response.data['sortOrder'], 0)

    def test_bulk_create_keeps_sort_order(self):
        """Twenty milestones posted at once come back in sortOrder"""
        payload = [
            {'label': label, 'timeframe': timeframe, 'sortOrder': index}
            for index, (label, timeframe) in enumerate(DEFAULT_MILESTONES)
        ]
        response = self.client.post('/api/milestones', list(reversed(payload)), format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(len(response.data), 20)

        response = self.client.get('/api/milestones')
        self.assertEqual(len(response.data), 20)
        self.assertEqual([milestone['sortOrder'] for milestone in response.data], list(range(20)))
        self.assertEqual(response.data[0]['label'], DEFAULT_MILESTONES[0][0])

    def test_bulk_create_is_all_or_nothing(self):
        payload = [
            {'label': 'One', 'timeframe': '12+ months'},
            {'timeframe': '12+ months'},
        ]
        response = self.client.post('/api/milestones', payload, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['field'], '1.label')
        self.assertEqual(Milestone.objects.filter(owner=self.user).count(), 0)

    def test_oversized_sort_order_rejected(self):
        payload = {'label': 'Book venue', 'timeframe': '12+ months', 'sortOrder': 10 ** 20}
        response = self.client.post('/api/milestones', payload, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['field'], 'sortOrder')
        self.assertEqual(Milestone.objects.filter(owner=self.user).count(), 0)

    def test_toggle_done(self):
        milestone = TestDataFactory.create_milestone(self.user)
        response = self.client.patch(f'/api/milestones/{milestone.pk}', {'done': True}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data['done'])
        self.assertEqual(response.data['label'], milestone.label)

    def test_set_and_clear_target_date(self):
        milestone = TestDataFactory.create_milestone(self.user)
        response = self.client.put(f'/api/milestones/{milestone.pk}', {'targetDate': '2026-05-01'}, format='json')
        self.assertEqual(response.data['targetDate'], '2026-05-01')
        response = self.client.put(f'/api/milestones/{milestone.pk}', {'targetDate': None}, format='json')
        self.assertIsNone(response.data['targetDate'])

    def test_foreign_milestone_not_found(self):
        other = TestDataFactory.create_user()
        milestone = TestDataFactory.create_milestone(other)
        response = self.client.patch(f'/api/milestones/{milestone.pk}', {'done': True}, format='json')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['message'], 'Milestone not found')
        milestone.refresh_from_db()
        self.assertFalse(milestone.done)


class PlanningTaskAPITests(TestCase):
    """Test planning task API endpoints"""

    def setUp(self):
        self.user = TestDataFactory.create_user()
        self.client = AuthenticatedAPIClient()
        self.client.authenticate_user(self.user)

    def test_create_task_defaults(self):
        response = self.client.post('/api/planning-tasks', {'name': 'Order favors'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['status'], 'not_started')
        self.assertEqual(response.data['assignee'], 'self')
        self.assertEqual(response.data['category'], 'General')
        self.assertEqual(response.data['dueDate'], '')

    def test_invalid_assignee(self):
        response = self.client.post('/api/planning-tasks', {'name': 'X', 'assignee': 'mom'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['field'], 'assignee')

    def test_advance_status(self):
        task = TestDataFactory.create_planning_task(self.user)
        response = self.client.put(f'/api/planning-tasks/{task.pk}', {'status': 'in_progress'}, format='json')
        self.assertEqual(response.data['status'], 'in_progress')
        response = self.client.put(f'/api/planning-tasks/{task.pk}', {'status': 'done'}, format='json')
        self.assertEqual(response.data['status'], 'done')

    def test_filters(self):
        TestDataFactory.create_planning_task(self.user, name='Cake', assignee='partner', status='done')
        TestDataFactory.create_planning_task(self.user, name='Music', category='Entertainment')
        response = self.client.get('/api/planning-tasks', {'assignee': 'partner'})
        self.assertEqual([task['name'] for task in response.data], ['Cake'])
        response = self.client.get('/api/planning-tasks', {'status': 'not_started'})
        self.assertEqual([task['name'] for task in response.data], ['Music'])
        response = self.client.get('/api/planning-tasks', {'category': 'entertainment'})
        self.assertEqual([task['name'] for task in response.data], ['Music'])

    def test_delete_task(self):
        task = TestDataFactory.create_planning_task(self.user)
        self.assertEqual(self.client.delete(f'/api/planning-tasks/{task.pk}').data, {'ok': True})
        response = self.client.delete(f'/api/planning-tasks/{task.pk}')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['message'], 'Planning task not found')


class PaymentAPITests(TestCase):
    """Test payment timeline endpoints"""

    def setUp(self):
        self.user = TestDataFactory.create_user()
        self.client = AuthenticatedAPIClient()
        self.client.authenticate_user(self.user)

    def test_payments_listed_by_sort_order(self):
        TestDataFactory.create_payment(self.user, label='Venue', sort_order=3)
        TestDataFactory.create_payment(self.user, label='DJ', sort_order=0)
        TestDataFactory.create_payment(self.user, label='Florist', sort_order=2)
        response = self.client.get('/api/payments')
        self.assertEqual([payment['label'] for payment in response.data], ['DJ', 'Florist', 'Venue'])

    def test_bulk_create_payments(self):
        payload = [
            {'date': row['date'], 'label': row['label'], 'amount': row['amount'], 'sortOrder': row['sort_order']}
            for row in default_payment_rows()
        ]
        response = self.client.post('/api/payments', payload, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(Payment.objects.filter(owner=self.user).count(), 4)
        self.assertTrue(all(not payment['paid'] for payment in response.data))

    def test_mark_paid(self):
        payment = TestDataFactory.create_payment(self.user, amount='$3,000')
        response = self.client.patch(f'/api/payments/{payment.pk}', {'paid': True}, format='json')
        self.assertTrue(response.data['paid'])
        self.assertEqual(response.data['amount'], '$3,000')

    def test_payment_requires_fields(self):
        response = self.client.post('/api/payments', {'label': 'Cake'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)


class DefaultRowsTests(TestCase):
    """Test the starter data definitions"""

    def test_default_milestones(self):
        rows = default_milestone_rows()
        self.assertEqual(len(rows), 20)
        self.assertEqual([row['sort_order'] for row in rows], list(range(20)))
        self.assertEqual(rows[-1]['timeframe'], 'Week of')

    def test_default_payments(self):
        labels = [row['label'] for row in default_payment_rows()]
        self.assertEqual(labels, ['DJ Final Balance', 'Catering 50% Milestone', 'Florist Retainer', 'Venue Final Payment'])


class PaymentOrderingTests(TestCase):
    """Equal sortOrder values fall back to creation order"""

    def test_tie_break_on_creation(self):
        user = TestDataFactory.create_user()
        client = AuthenticatedAPIClient()
        client.authenticate_user(user)
        first = TestDataFactory.create_payment(user, label='First', sort_order=1)
        second = TestDataFactory.create_payment(user, label='Second', sort_order=1)
        TestDataFactory.create_payment(user, label='Zero', sort_order=0)
        response = client.get('/api/payments')
        self.assertEqual([payment['id'] for payment in response.data][1:], [first.pk, second.pk])
