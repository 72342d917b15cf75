import backend.core.models
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Guest',
            fields=[
                ('id', models.CharField(default=backend.core.models.generate_id, editable=False, max_length=36, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('name', models.CharField(max_length=200)),
                ('plus_one', models.BooleanField(default=False)),
                ('rsvp', models.CharField(choices=[('pending', 'Pending'), ('attending', 'Attending'), ('declined', 'Declined')], default='pending', max_length=20)),
                ('dietary', models.CharField(blank=True, default='', max_length=200)),
                ('table_assignment', models.CharField(blank=True, default='', max_length=100)),
                ('side', models.CharField(choices=[('partner1', 'Partner 1'), ('partner2', 'Partner 2'), ('both', 'Both')], default='both', max_length=20)),
                ('notes', models.TextField(blank=True, default='')),
                ('owner', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='+', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'guests',
            },
        ),
    ]
