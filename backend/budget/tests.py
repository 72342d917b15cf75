"""
Test suite for the budget module
Tests: budget upsert, categories, items, cascade delete and summary calculations
"""
from io import StringIO
from types import SimpleNamespace
from django.conf import settings
from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import TestCase
from rest_framework import status
from backend.core.test_utils import TestDataFactory, AuthenticatedAPIClient
from backend.budget.models import Budget, BudgetCategory, BudgetItem
from backend.budget.summary import category_status, spend_percentage, summarize_budget
from backend.planning.models import Milestone, Payment


class BudgetAPITests(TestCase):
    """Test the singleton budget endpoint"""

    def setUp(self):
        self.user = TestDataFactory.create_user()
        self.client = AuthenticatedAPIClient()
        self.client.authenticate_user(self.user)

    def test_default_when_unset(self):
        response = self.client.get('/api/budget')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, {'totalBudget': settings.DEFAULT_TOTAL_BUDGET})
        self.assertFalse(Budget.objects.filter(owner=self.user).exists())

    def test_upsert_reuses_record(self):
        """A second PUT updates the same budget instead of creating another"""
        first = self.client.put('/api/budget', {'totalBudget': 50000}, format='json')
        self.assertEqual(first.status_code, status.HTTP_200_OK)
        self.assertEqual(first.data['totalBudget'], 50000)

        second = self.client.put('/api/budget', {'totalBudget': 70000}, format='json')
        self.assertEqual(second.status_code, status.HTTP_200_OK)
        self.assertEqual(second.data['id'], first.data['id'])
        self.assertEqual(second.data['totalBudget'], 70000)
        self.assertEqual(Budget.objects.filter(owner=self.user).count(), 1)

        response = self.client.get('/api/budget')
        self.assertEqual(response.data['totalBudget'], 70000)
        self.assertIn('updatedAt', response.data)

    def test_negative_budget_rejected(self):
        response = self.client.put('/api/budget', {'totalBudget': -1}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['field'], 'totalBudget')

    def test_oversized_budget_rejected(self):
        """Values beyond the integer column are a validation error, not a server fault"""
        response = self.client.put('/api/budget', {'totalBudget': 10 ** 20}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['field'], 'totalBudget')
        self.assertFalse(Budget.objects.filter(owner=self.user).exists())

    def test_budgets_are_per_user(self):
        other = TestDataFactory.create_user()
        TestDataFactory.create_budget(other, total_budget=10000)
        response = self.client.get('/api/budget')
        self.assertEqual(response.data['totalBudget'], settings.DEFAULT_TOTAL_BUDGET)


class BudgetCategoryAPITests(TestCase):
    """Test budget category endpoints"""

    def setUp(self):
        self.user = TestDataFactory.create_user()
        self.client = AuthenticatedAPIClient()
        self.client.authenticate_user(self.user)

    def test_bulk_create_categories(self):
        payload = [
            {'name': 'Venue & Catering', 'target': 30000, 'sortOrder': 0},
            {'name': 'Florals & Decor', 'target': 5000, 'sortOrder': 1},
        ]
        response = self.client.post('/api/budget/categories', payload, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual([category['name'] for category in response.data], ['Venue & Catering', 'Florals & Decor'])

    def test_category_defaults(self):
        response = self.client.post('/api/budget/categories', {'name': 'Misc'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['target'], 0)
        self.assertEqual(response.data['sortOrder'], 0)

    def test_negative_target_rejected(self):
        response = self.client.post('/api/budget/categories', {'name': 'Misc', 'target': -5}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['field'], 'target')

    def test_delete_category_cascades_to_items(self):
        category = TestDataFactory.create_budget_category(self.user)
        TestDataFactory.create_budget_item(self.user, category=category)
        TestDataFactory.create_budget_item(self.user, category=category)
        keep = TestDataFactory.create_budget_item(self.user)

        response = self.client.delete(f'/api/budget/categories/{category.pk}')
        self.assertEqual(response.data, {'ok': True})
        self.assertFalse(BudgetItem.objects.filter(category_id=category.pk).exists())
        self.assertEqual(list(BudgetItem.objects.filter(owner=self.user)), [keep])

    def test_foreign_category_delete_not_found(self):
        other = TestDataFactory.create_user()
        category = TestDataFactory.create_budget_category(other)
        TestDataFactory.create_budget_item(other, category=category)
        response = self.client.delete(f'/api/budget/categories/{category.pk}')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['message'], 'Category not found')
        self.assertEqual(BudgetItem.objects.filter(owner=other).count(), 1)


class BudgetItemAPITests(TestCase):
    """Test budget item endpoints"""

    def setUp(self):
        self.user = TestDataFactory.create_user()
        self.client = AuthenticatedAPIClient()
        self.client.authenticate_user(self.user)
        self.category = TestDataFactory.create_budget_category(self.user, name='Venue', target=30000)

    def test_create_item(self):
        data = {'categoryId': self.category.pk, 'name': 'Deposit', 'cost': 5000}
        response = self.client.post('/api/budget/items', data, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['categoryId'], self.category.pk)
        self.assertFalse(response.data['paid'])

    def test_nonexistent_category(self):
        data = {'categoryId': 'nonexistent', 'name': 'X', 'cost': 100}
        response = self.client.post('/api/budget/items', data, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['message'], 'Category not found')
        self.assertEqual(response.data['field'], 'categoryId')
        self.assertEqual(BudgetItem.objects.count(), 0)

    def test_foreign_category_rejected(self):
        other = TestDataFactory.create_user()
        foreign = TestDataFactory.create_budget_category(other)
        data = {'categoryId': foreign.pk, 'name': 'X', 'cost': 100}
        response = self.client.post('/api/budget/items', data, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['message'], 'Category not found')

    def test_move_item_to_foreign_category_rejected(self):
        item = TestDataFactory.create_budget_item(self.user, category=self.category)
        foreign = TestDataFactory.create_budget_category(TestDataFactory.create_user())
        response = self.client.patch(f'/api/budget/items/{item.pk}', {'categoryId': foreign.pk}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        item.refresh_from_db()
        self.assertEqual(item.category, self.category)

    def test_mark_item_paid(self):
        item = TestDataFactory.create_budget_item(self.user, category=self.category, cost=1200)
        response = self.client.put(f'/api/budget/items/{item.pk}', {'paid': True}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data['paid'])
        self.assertEqual(response.data['cost'], 1200)

    def test_filter_by_category(self):
        other_category = TestDataFactory.create_budget_category(self.user, name='Music')
        TestDataFactory.create_budget_item(self.user, category=self.category, name='Hall')
        TestDataFactory.create_budget_item(self.user, category=other_category, name='Band')
        response = self.client.get('/api/budget/items', {'categoryId': other_category.pk})
        self.assertEqual([item['name'] for item in response.data], ['Band'])

    def test_oversized_cost_rejected(self):
        data = {'categoryId': self.category.pk, 'name': 'Castle', 'cost': 10 ** 20}
        response = self.client.post('/api/budget/items', data, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['field'], 'cost')

    def test_missing_item_message(self):
        response = self.client.delete('/api/budget/items/missing')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['message'], 'Budget item not found')

    def test_items_rejects_array(self):
        response = self.client.post('/api/budget/items', [], format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)


class BudgetSummaryTests(TestCase):
    """Test budget roll-up calculations"""

    def test_spend_percentage(self):
        self.assertEqual(spend_percentage(32500, 30000), 108)
        self.assertEqual(spend_percentage(5500, 8000), 69)
        self.assertEqual(spend_percentage(100, 0), 0)

    def test_category_status(self):
        self.assertEqual(category_status(0, 5000), 'pending')
        self.assertEqual(category_status(4200, 4000), 'over')
        self.assertEqual(category_status(6000, 6000), 'on_target')
        self.assertEqual(category_status(5500, 8000), 'under')
        self.assertEqual(category_status(100, 0), 'over')

    def test_summarize_budget(self):
        venue = SimpleNamespace(pk='venue', name='Venue', target=30000)
        flowers = SimpleNamespace(pk='flowers', name='Flowers', target=5000)
        items = [
            SimpleNamespace(category_id='venue', cost=20000, paid=True),
            SimpleNamespace(category_id='venue', cost=12500, paid=False),
        ]
        summary = summarize_budget(65000, [venue, flowers], items)
        self.assertEqual(summary['allocated'], 35000)
        self.assertEqual(summary['committed'], 32500)
        self.assertEqual(summary['paid'], 20000)
        self.assertEqual(summary['remaining'], 32500)
        venue_row, flowers_row = summary['categories']
        self.assertEqual(venue_row['status'], 'over')
        self.assertEqual(venue_row['percentage'], 108)
        self.assertEqual(flowers_row['status'], 'pending')
        self.assertEqual(flowers_row['spent'], 0)

    def test_summary_endpoint(self):
        user = TestDataFactory.create_user()
        client = AuthenticatedAPIClient()
        client.authenticate_user(user)
        TestDataFactory.create_budget(user, total_budget=40000)
        category = TestDataFactory.create_budget_category(user, name='Entertainment', target=6000)
        TestDataFactory.create_budget_item(user, category=category, cost=6000, paid=True)

        response = client.get('/api/budget/summary')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['totalBudget'], 40000)
        self.assertEqual(response.data['remaining'], 34000)
        self.assertEqual(response.data['categories'][0]['status'], 'on_target')
        self.assertEqual(response.data['categories'][0]['paid'], 6000)


class SeedPlannerCommandTests(TestCase):
    """Test the seed_planner management command"""

    def setUp(self):
        self.user = TestDataFactory.create_user(username='seeded')

    def test_seeds_defaults(self):
        call_command('seed_planner', 'seeded', stdout=StringIO())
        self.assertEqual(Milestone.objects.filter(owner=self.user).count(), 20)
        self.assertEqual(Payment.objects.filter(owner=self.user).count(), 4)
        self.assertEqual(BudgetCategory.objects.filter(owner=self.user).count(), 5)

    def test_existing_data_left_alone(self):
        TestDataFactory.create_budget_category(self.user, name='Mine')
        call_command('seed_planner', 'seeded', stdout=StringIO())
        self.assertEqual(list(BudgetCategory.objects.filter(owner=self.user).values_list('name', flat=True)), ['Mine'])
        self.assertEqual(Milestone.objects.filter(owner=self.user).count(), 20)

    def test_unknown_user(self):
        with self.assertRaises(CommandError):
            call_command('seed_planner', 'nobody')
