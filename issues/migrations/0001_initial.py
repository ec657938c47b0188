import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


DEPARTMENT_CHOICES = [
    ("Computer Science & Engineering", "Computer Science & Engineering"),
    ("Electrical & Electronic Engineering", "Electrical & Electronic Engineering"),
    ("Civil Engineering", "Civil Engineering"),
    ("Business Administration", "Business Administration"),
    ("Economics", "Economics"),
    ("English", "English"),
    ("Mathematics", "Mathematics"),
    ("Physics", "Physics"),
    ("Chemistry", "Chemistry"),
    ("Pharmacy", "Pharmacy"),
    ("Student Affairs", "Student Affairs"),
    ("Admissions Office", "Admissions Office"),
    ("IT Department", "IT Department"),
    ("Finance Office", "Finance Office"),
    ("Library", "Library"),
    ("Registrar Office", "Registrar Office"),
    ("Other", "Other"),
]

CATEGORY_CHOICES = [
    ("Academic Issue", "Academic Issue"),
    ("Admission & Registration", "Admission & Registration"),
    ("Facilities & Infrastructure", "Facilities & Infrastructure"),
    ("IT & Technology", "IT & Technology"),
    ("Library Services", "Library Services"),
    ("Student Services", "Student Services"),
    ("Transportation", "Transportation"),
    ("Hostel/Accommodation", "Hostel/Accommodation"),
    ("Financial Services", "Financial Services"),
    ("Health & Safety", "Health & Safety"),
    ("Other", "Other"),
]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Issue",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=255)),
                ("description", models.TextField()),
                ("category", models.CharField(choices=CATEGORY_CHOICES, max_length=64)),
                ("department", models.CharField(choices=DEPARTMENT_CHOICES, db_index=True, max_length=64)),
                ("priority", models.CharField(choices=[("low", "Low"), ("medium", "Medium"), ("high", "High"), ("urgent", "Urgent")], default="medium", max_length=10)),
                ("status", models.CharField(choices=[("pending", "Pending"), ("assigned", "Assigned"), ("in_progress", "In Progress"), ("resolved", "Resolved"), ("rejected", "Rejected")], db_index=True, default="pending", max_length=16)),
                ("attachments", models.JSONField(blank=True, default=list)),
                ("feedback", models.TextField(blank=True, default="")),
                ("rating", models.PositiveSmallIntegerField(blank=True, null=True)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now, editable=False)),
                ("updated_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("resolved_at", models.DateTimeField(blank=True, null=True)),
                ("assigned_to", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name="assigned_issues", to=settings.AUTH_USER_MODEL)),
                ("student", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="reported_issues", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "issues",
                "ordering": ["id"],
                "indexes": [models.Index(fields=["department", "status"], name="issues_dept_status_idx")],
            },
        ),
        migrations.CreateModel(
            name="Comment",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("content", models.TextField()),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now, editable=False)),
                ("author", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="issue_comments", to=settings.AUTH_USER_MODEL)),
                ("issue", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="comments", to="issues.issue")),
            ],
            options={
                "db_table": "comments",
                "ordering": ["created_at", "id"],
            },
        ),
        migrations.CreateModel(
            name="IssueHistory",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("field_name", models.CharField(max_length=50)),
                ("old_value", models.TextField(blank=True)),
                ("new_value", models.TextField(blank=True)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now, editable=False)),
                ("actor", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="+", to=settings.AUTH_USER_MODEL)),
                ("issue", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="history", to="issues.issue")),
            ],
            options={
                "db_table": "issue_history",
                "ordering": ["-created_at", "-id"],
            },
        ),
        migrations.CreateModel(
            name="Notification",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=200)),
                ("message", models.TextField(blank=True, default="")),
                ("read", models.BooleanField(db_index=True, default=False)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now, editable=False)),
                ("issue", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="notifications", to="issues.issue")),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="notifications", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "notifications",
                "ordering": ["-created_at", "-id"],
            },
        ),
    ]
