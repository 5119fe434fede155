import json

from django.core.management.base import BaseCommand
from payments.chapa import get_client


class Command(BaseCommand):
    help = 'Verify a Chapa transaction and print the gateway response'

    def add_arguments(self, parser):
        parser.add_argument('transaction_id', help='tx_ref of the transaction to verify')

    def handle(self, *args, **options):
        response = get_client().verify_payment(options['transaction_id'])
        self.stdout.write(json.dumps(response, indent=2))
