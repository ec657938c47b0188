from django.core.management.base import BaseCommand

from accounts.models import User
from issues.choices import Department

DEMO_USERS = [
    {
        "email": "student@uiu.ac.bd",
        "full_name": "John Smith",
        "role": User.Role.STUDENT,
        "department": Department.CSE,
        "student_number": "011191001",
        "phone": "+8801712345678",
    },
    {
        "email": "admin@uiu.ac.bd",
        "full_name": "Dr. Ahmed Rahman",
        "role": User.Role.DSW_ADMIN,
        "department": Department.STUDENT_AFFAIRS,
        "phone": "+8801987654321",
    },
    {
        "email": "staff@uiu.ac.bd",
        "full_name": "Ms. Fatima Khan",
        "role": User.Role.DEPT_STAFF,
        "department": Department.CSE,
        "phone": "+8801555666777",
    },
]


class Command(BaseCommand):
    help = "Create the demo student, DSW admin and department staff accounts"

    def add_arguments(self, parser):
        parser.add_argument("--password", required=True, help="Password set on every demo account")

    def handle(self, *args, **options):
        for data in DEMO_USERS:
            data = dict(data)
            email = data.pop("email")
            if User.objects.filter(email=email).exists():
                self.stdout.write(f"Skip {email}: already exists")
                continue
            User.objects.create_user(email=email, password=options["password"], **data)
            self.stdout.write(self.style.SUCCESS(f"Created {email} ({data['role']})"))
