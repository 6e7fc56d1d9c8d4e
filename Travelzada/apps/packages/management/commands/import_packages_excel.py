"""
Imports packages from a package workbook.

Usage:
    python manage.py import_packages_excel <path>
    python manage.py import_packages_excel <path> --dry-run
    python manage.py import_packages_excel <path> --created-by ops@travelzada.com

Runs the same pipeline as the dashboard upload: sheets are joined on
Destination_ID, rows whose ID already exists are skipped and the rest are
created.
"""
from django.core.management.base import BaseCommand, CommandError

from apps.packages.excel import ExcelImportError, load_package_workbook, prepare_import
from apps.packages.services import existing_package_ids, import_packages


class Command(BaseCommand):
    help = 'Imports packages from an .xlsx workbook, skipping IDs that already exist'

    def add_arguments(self, parser):
        parser.add_argument(
            'path',
            help='Path of the .xlsx workbook'
        )
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Show what would be imported without writing anything'
        )
        parser.add_argument(
            '--created-by',
            default='Excel Import',
            help='Value stored in Created_By for the new packages'
        )

    def handle(self, *args, **options):
        path = options['path']

        try:
            with open(path, 'rb') as workbook_file:
                sheets = load_package_workbook(workbook_file, path)
        except FileNotFoundError:
            raise CommandError(f'File {path} does not exist.')
        except ExcelImportError as e:
            raise CommandError(str(e))

        preview = prepare_import(sheets, existing_package_ids())

        self.stdout.write('\n' + '=' * 60)
        self.stdout.write(f'WORKBOOK: {path}')
        self.stdout.write('=' * 60)
        for sheet, count in preview['sheets'].items():
            self.stdout.write(f'  {sheet}: {count} rows')

        self.stdout.write(self.style.SUCCESS(f'\nNew packages: {len(preview["new_ids"])}'))
        for pkg_id in preview['new_ids']:
            self.stdout.write(f'  + {pkg_id}')

        if preview['duplicate_ids']:
            self.stdout.write(self.style.WARNING(f'Already exist: {len(preview["duplicate_ids"])}'))
            for pkg_id in preview['duplicate_ids']:
                self.stdout.write(f'  = {pkg_id}')

        if options['dry_run']:
            self.stdout.write(self.style.WARNING('\n[DRY RUN] Nothing was written.'))
            return

        if not preview['packages']:
            self.stdout.write('\nNothing to import.')
            return

        result = import_packages(preview['packages'], options['created_by'])
        self.stdout.write('\n' + self.style.SUCCESS(result['message']))
        for error in result['errors']:
            self.stdout.write(self.style.ERROR(f'  {error}'))
