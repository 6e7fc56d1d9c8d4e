"""
Writes every package as a JSON array, in the format accepted by the bulk
import endpoint.

Usage:
    python manage.py export_packages_json
    python manage.py export_packages_json --output packages.json
"""
import json

from django.core.management.base import BaseCommand

from apps.packages.models import Package
from apps.packages.serializers import PackageSerializer

INTERNAL_FIELDS = ('id', 'created_at', 'updated_at')


class Command(BaseCommand):
    help = 'Exports all packages as a JSON array'

    def add_arguments(self, parser):
        parser.add_argument(
            '--output',
            help='File to write; standard output when omitted'
        )
        parser.add_argument(
            '--destination',
            help='Only packages whose Destination_Name contains this text'
        )

    def handle(self, *args, **options):
        queryset = Package.objects.order_by('destination_id')
        if options['destination']:
            queryset = queryset.filter(destination_name__icontains=options['destination'])

        data = []
        for package in queryset:
            item = PackageSerializer(package).data
            for field in INTERNAL_FIELDS:
                item.pop(field, None)
            data.append(item)

        content = json.dumps(data, indent=2, ensure_ascii=False, default=str)

        if options['output']:
            with open(options['output'], 'w', encoding='utf-8') as output:
                output.write(content)
            self.stdout.write(self.style.SUCCESS(f'{len(data)} packages written to {options["output"]}'))
        else:
            self.stdout.write(content)
