from django.core.management.base import BaseCommand

from Records.services import registry_create


class Command(BaseCommand):
    help = "Create a certificate registry owned by the given administrator identity"

    def add_arguments(self, parser):
        parser.add_argument("administrator", help="Caller identity of the registry administrator")

    def handle(self, *args, **options):
        registry = registry_create(administrator=options["administrator"])
        self.stdout.write(self.style.SUCCESS(f"Registry created: {registry.id}"))
        self.stdout.write(f"Administrator: {registry.administrator}")
