from visitor_pass.models.pass_record import PassRecord, PASS_STATUS_ACTIVE, PASS_STATUS_EXPIRED

__all__ = ["PassRecord", "PASS_STATUS_ACTIVE", "PASS_STATUS_EXPIRED"]
