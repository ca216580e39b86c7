import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Project',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.TextField(db_index=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'db_table': 'projects',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='Issue',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('issue_title', models.TextField()),
                ('issue_text', models.TextField()),
                ('created_by', models.TextField()),
                ('assigned_to', models.TextField(blank=True, default='')),
                ('status_text', models.TextField(blank=True, default='')),
                ('open', models.BooleanField(default=True)),
                ('created_on', models.DateTimeField()),
                ('updated_on', models.DateTimeField()),
                ('project', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='issues', to='issues.project')),
            ],
            options={
                'db_table': 'issues',
                'ordering': ['id'],
                'indexes': [models.Index(fields=['project', 'open'], name='issues_project_open_idx')],
            },
        ),
    ]
