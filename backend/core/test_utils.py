"""
Test utilities and factories for creating test data
"""
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient
from backend.guests.models import Guest
from backend.vendors.models import Vendor
from backend.notes.models import Note
from backend.planning.models import Milestone, PlanningTask, Payment
from backend.budget.models import Budget, BudgetCategory, BudgetItem
import random
import string

User = get_user_model()


class TestDataFactory:
    """Factory class for creating test data"""

    @staticmethod
    def random_string(length=10):
        """Generate a random string"""
        return ''.join(random.choices(string.ascii_letters + string.digits, k=length))

    @staticmethod
    def create_user(username=None, password='testpass123', is_staff=False, is_superuser=False):
        """Create a test user"""
        if not username:
            username = f'testuser_{TestDataFactory.random_string(6)}'
        return User.objects.create_user(
            username=username,
            password=password,
            is_staff=is_staff,
            is_superuser=is_superuser
        )

    @staticmethod
    def create_guest(owner, name=None, **fields):
        """Create a test guest"""
        if not name:
            name = f'Guest_{TestDataFactory.random_string(6)}'
        return Guest.objects.create(owner=owner, name=name, **fields)

    @staticmethod
    def create_vendor(owner, category='Photography', **fields):
        """Create a test vendor"""
        fields.setdefault('vendor_name', f'Vendor_{TestDataFactory.random_string(6)}')
        return Vendor.objects.create(owner=owner, category=category, **fields)

    @staticmethod
    def create_note(owner, title=None, content='', **fields):
        """Create a test note"""
        if title is None:
            title = f'Note_{TestDataFactory.random_string(6)}'
        return Note.objects.create(owner=owner, title=title, content=content, **fields)

    @staticmethod
    def create_milestone(owner, label=None, timeframe='12+ months', sort_order=0, **fields):
        """Create a test milestone"""
        if not label:
            label = f'Milestone_{TestDataFactory.random_string(6)}'
        return Milestone.objects.create(owner=owner, label=label, timeframe=timeframe, sort_order=sort_order, **fields)

    @staticmethod
    def create_planning_task(owner, name=None, **fields):
        """Create a test planning task"""
        if not name:
            name = f'Task_{TestDataFactory.random_string(6)}'
        return PlanningTask.objects.create(owner=owner, name=name, **fields)

    @staticmethod
    def create_payment(owner, label=None, date='Mar 15', amount='$1,000', sort_order=0, **fields):
        """Create a test payment"""
        if not label:
            label = f'Payment_{TestDataFactory.random_string(6)}'
        return Payment.objects.create(
            owner=owner, label=label, date=date, amount=amount, sort_order=sort_order, **fields
        )

    @staticmethod
    def create_budget(owner, total_budget=50000):
        """Create a test budget"""
        return Budget.objects.create(owner=owner, total_budget=total_budget)

    @staticmethod
    def create_budget_category(owner, name=None, target=0, sort_order=0):
        """Create a test budget category"""
        if not name:
            name = f'Category_{TestDataFactory.random_string(6)}'
        return BudgetCategory.objects.create(owner=owner, name=name, target=target, sort_order=sort_order)

    @staticmethod
    def create_budget_item(owner, category=None, name=None, cost=0, paid=False):
        """Create a test budget item"""
        if category is None:
            category = TestDataFactory.create_budget_category(owner)
        if not name:
            name = f'Item_{TestDataFactory.random_string(6)}'
        return BudgetItem.objects.create(owner=owner, category=category, name=name, cost=cost, paid=paid)


class AuthenticatedAPIClient(APIClient):
    """APIClient with authentication helper"""

    def authenticate_user(self, user):
        """Attach a logged-in session for the user"""
        self.force_login(user)
        return self

    def logout(self):
        """Drop the session"""
        super().logout()
