import accounts.models
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("auth", "0012_alter_user_first_name_max_length"),
    ]

    operations = [
        migrations.CreateModel(
            name="User",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("password", models.CharField(max_length=128, verbose_name="password")),
                ("last_login", models.DateTimeField(blank=True, null=True, verbose_name="last login")),
                ("is_superuser", models.BooleanField(default=False, help_text="Designates that this user has all permissions without explicitly assigning them.", verbose_name="superuser status")),
                ("first_name", models.CharField(blank=True, max_length=150, verbose_name="first name")),
                ("last_name", models.CharField(blank=True, max_length=150, verbose_name="last name")),
                ("is_staff", models.BooleanField(default=False, help_text="Designates whether the user can log into this admin site.", verbose_name="staff status")),
                ("is_active", models.BooleanField(default=True, help_text="Designates whether this user should be treated as active. Unselect this instead of deleting accounts.", verbose_name="active")),
                ("date_joined", models.DateTimeField(default=django.utils.timezone.now, verbose_name="date joined")),
                ("email", models.EmailField(max_length=254, unique=True)),
                ("full_name", models.CharField(blank=True, default="", max_length=150)),
                ("role", models.CharField(choices=[("student", "Student"), ("dsw_admin", "DSW Admin"), ("dept_staff", "Department Staff")], db_index=True, default="student", max_length=16)),
                ("department", models.CharField(blank=True, choices=[
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
                ], default="", max_length=64)),
                ("student_number", models.CharField(blank=True, default="", max_length=32)),
                ("phone", models.CharField(blank=True, default="", max_length=32)),
                ("groups", models.ManyToManyField(blank=True, help_text="The groups this user belongs to. A user will get all permissions granted to each of their groups.", related_name="user_set", related_query_name="user", to="auth.group", verbose_name="groups")),
                ("user_permissions", models.ManyToManyField(blank=True, help_text="Specific permissions for this user.", related_name="user_set", related_query_name="user", to="auth.permission", verbose_name="user permissions")),
            ],
            options={
                "db_table": "users",
            },
            managers=[
                ("objects", accounts.models.UserManager()),
            ],
        ),
    ]
