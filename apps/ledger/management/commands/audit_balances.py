"""
Management command to reconcile user balances with the ledger.

Recomputes every user's ʻĀina Bucks aggregates from their ledger entries
and reports users whose stored values drifted.

Usage:
    python manage.py audit_balances
    python manage.py audit_balances --fix
"""

from django.core.management.base import BaseCommand

from apps.ledger.services import audit_balances, repair_drifted_balances


class Command(BaseCommand):
    help = 'Compare user balances with the ʻĀina Bucks ledger (optionally repair)'

    def add_arguments(self, parser):
        parser.add_argument(
            '--fix',
            action='store_true',
            help='Overwrite drifted aggregates with the values computed from the ledger',
        )

    def handle(self, *args, **options):
        fix = options['fix']

        reports = repair_drifted_balances() if fix else audit_balances()

        if not reports:
            self.stdout.write(
                self.style.SUCCESS('All balances match the ledger.')
            )
            return

        self.stdout.write(f'\nFound {len(reports)} user(s) with drifted balances:\n')

        for report in reports:
            for field in report['drift']:
                self.stdout.write(
                    f"  - {report['user_id']} | {field}: "
                    f"stored {report['stored'][field]}, ledger {report['expected'][field]}"
                )

        if not fix:
            self.stdout.write(
                self.style.WARNING('\nRun with --fix to repair.')
            )
            return

        self.stdout.write(
            self.style.SUCCESS(f'\nRepaired {len(reports)} user(s).')
        )
