"""Protocol constants for the Netgear SOAP management interface."""

# Fixed session token required by this firmware family on every request,
# independent of the login state.
SESSION_ID = "A7D88AE69687E58D9A00"

DEFAULT_PORT = 5000
SOAP_PATH = "/soap/server_sa/"

SUCCESS_MARKER = "<ResponseCode>000</ResponseCode>"

SOAP_LOGIN_ACTION = "urn:NETGEAR-ROUTER:service:ParentalControl:1#Authenticate"
SOAP_LOGIN = """\
<?xml version="1.0" encoding="utf-8" ?>
<SOAP-ENV:Envelope xmlns:SOAP-ENV="http://schemas.xmlsoap.org/soap/envelope/">
<SOAP-ENV:Header>
<SessionID xsi:type="xsd:string" xmlns:xsi="http://www.w3.org/1999/XMLSchema-instance">{session_id}</SessionID>
</SOAP-ENV:Header>
<SOAP-ENV:Body>
<Authenticate>
  <NewUsername>{username}</NewUsername>
  <NewPassword>{password}</NewPassword>
</Authenticate>
</SOAP-ENV:Body>
</SOAP-ENV:Envelope>
"""

SOAP_ATTACHED_DEVICES_ACTION = "urn:NETGEAR-ROUTER:service:DeviceInfo:1#GetAttachDevice"
SOAP_ATTACHED_DEVICES = """\
<?xml version="1.0" encoding="utf-8" standalone="no"?>
<SOAP-ENV:Envelope xmlns:SOAPSDK1="http://www.w3.org/2001/XMLSchema" xmlns:SOAPSDK2="http://www.w3.org/2001/XMLSchema-instance" xmlns:SOAPSDK3="http://schemas.xmlsoap.org/soap/encoding/" xmlns:SOAP-ENV="http://schemas.xmlsoap.org/soap/envelope/">
<SOAP-ENV:Header>
<SessionID>{session_id}</SessionID>
</SOAP-ENV:Header>
<SOAP-ENV:Body>
<M1:GetAttachDevice xmlns:M1="urn:NETGEAR-ROUTER:service:DeviceInfo:1">
</M1:GetAttachDevice>
</SOAP-ENV:Body>
</SOAP-ENV:Envelope>
"""

# Each attached device is flattened into this many ';'-separated fields.
DEVICE_FIELD_COUNT = 6
