# agency/management/commands/serve.py
from django.conf import settings
from django.core.management import call_command
from django.core.management.base import BaseCommand


class Command(BaseCommand):
    help = "Levanta el servidor de la API en el puerto configurado (PORT)."

    def add_arguments(self, parser):
        parser.add_argument("--port", type=int, default=None, help="Puerto (por defecto settings.PORT)")
        parser.add_argument("--host", default="0.0.0.0", help="Interfaz de escucha")

    def handle(self, *args, **options):
        port = options["port"] or settings.PORT
        addrport = f"{options['host']}:{port}"
        self.stdout.write(self.style.SUCCESS(f"Servidor en ejecución en http://{addrport}"))
        call_command("runserver", addrport)
