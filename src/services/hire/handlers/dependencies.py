"""Lambda 実行環境で使う DynamoDB / EventBridge 実装の組み立て

コールドスタート時に1度だけ生成し、各ハンドラから共有する。
"""

from services.currency.infrastructure.dynamodb_exchange_rate_repository import (
    DynamoDBExchangeRateRepository,
)
from services.guide.infrastructure.dynamodb_guide_repository import (
    DynamoDBGuideRepository,
)
from services.hire.applications.create_payable_order import CreatePayableOrderService
from services.hire.applications.reservation_transaction import ReservationTransaction
from services.hire.domain.factory import HireRecordFactory
from services.hire.infrastructure.dynamodb_hire_record_repository import (
    DynamoDBHireRecordRepository,
)
from services.hire.infrastructure.dynamodb_order_gateway import DynamoDBOrderGateway
from services.hire.infrastructure.dynamodb_reservation_store import (
    DynamoDBReservationStore,
)
from services.hire.infrastructure.eventbridge_hire_notifier import (
    EventBridgeHireNotifier,
)

guide_repository = DynamoDBGuideRepository()
hire_repository = DynamoDBHireRecordRepository()
rate_repository = DynamoDBExchangeRateRepository()
notifier = EventBridgeHireNotifier()
factory = HireRecordFactory()

transaction = ReservationTransaction(
    guide_repository=guide_repository, store=DynamoDBReservationStore()
)
order_service = CreatePayableOrderService(
    repository=hire_repository, order_gateway=DynamoDBOrderGateway()
)
