"""
Management command to give a user the starter checklist, payment timeline
and budget categories
"""
from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError

from backend.budget.defaults import default_category_rows
from backend.budget.views import budget_category_repository
from backend.planning.defaults import default_milestone_rows, default_payment_rows
from backend.planning.views import milestone_repository, payment_repository

User = get_user_model()


class Command(BaseCommand):
    help = "Seeds default milestones, payments and budget categories for a user"

    def add_arguments(self, parser):
        parser.add_argument('username', help='User to seed')
        parser.add_argument(
            '--clear',
            action='store_true',
            help="Delete the user's existing milestones, payments and categories first",
        )

    def handle(self, *args, **options):
        try:
            user = User.objects.get(username=options['username'])
        except User.DoesNotExist:
            raise CommandError(f"User '{options['username']}' does not exist")

        sections = [
            ('Milestones', milestone_repository, default_milestone_rows),
            ('Payments', payment_repository, default_payment_rows),
            ('Budget categories', budget_category_repository, default_category_rows),
        ]

        self.stdout.write(self.style.SUCCESS(f"SEEDING PLANNER FOR {user.username}"))

        if options['clear']:
            self.stdout.write(self.style.WARNING("Clearing existing records..."))
            for _, repository, _ in sections:
                repository.list_for_owner(user).delete()

        for title, repository, rows in sections:
            # Never mix defaults into data the user already has
            if repository.list_for_owner(user).exists():
                self.stdout.write(self.style.WARNING(f"  ⊘ Skipped {title} (already present)"))
                continue
            records = repository.create_many(user, rows())
            self.stdout.write(self.style.SUCCESS(f"  ✓ Created {len(records)} {title}"))
