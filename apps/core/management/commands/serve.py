from django.conf import settings
from django.core.management import call_command
from django.core.management.base import BaseCommand


class Command(BaseCommand):
    help = 'Runs the API server on the configured PORT (default 8484).'

    def add_arguments(self, parser):
        parser.add_argument(
            '--port',
            type=int,
            default=None,
            help='Port to listen on (overrides the PORT setting)',
        )
        parser.add_argument(
            '--host',
            default='0.0.0.0',
            help='Interface to bind',
        )

    def handle(self, *args, **options):
        port = options['port'] or settings.PORT
        self.stdout.write(self.style.SUCCESS(f'Server is running on http://localhost:{port}'))
        call_command('runserver', f"{options['host']}:{port}", use_reloader=False)
