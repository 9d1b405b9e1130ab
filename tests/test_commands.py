from io import StringIO

from django.core.management import call_command

from Records.models import Registry


def test_create_registry_command(db):
    out = StringIO()
    call_command("create_registry", "0xAdmin", stdout=out)

    registry = Registry.objects.get()
    assert registry.administrator == "0xAdmin"
    assert str(registry.id) in out.getvalue()
