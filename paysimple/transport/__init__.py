from paysimple.transport.retry import with_retry
from paysimple.transport.serialization import Serializer
from paysimple.transport.signature import SignatureGenerator
from paysimple.transport.web_request import WebServiceRequest

__all__ = ["Serializer", "SignatureGenerator", "WebServiceRequest", "with_retry"]
