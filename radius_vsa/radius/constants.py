"""RADIUS Vendor-Specific Attribute constants.

Wire constants for the Vendor-Specific Attribute (RFC 2865 §5.26) and its
continuation layout (RFC 6929 §2.4), plus the IANA Private Enterprise
Numbers used by the built-in vendor dictionary.
"""

# Standard RADIUS Attribute Types (RFC 2865 §5)
ATTR_USER_NAME = 1
ATTR_NAS_IP_ADDRESS = 4
ATTR_REPLY_MESSAGE = 18
ATTR_CLASS = 25
ATTR_VENDOR_SPECIFIC = 26
ATTR_SESSION_TIMEOUT = 27

# Attribute size limits (RFC 2865 §5)
ATTR_HEADER_LENGTH = 2  # Type(1) + Length(1)
MAX_ATTRIBUTE_LENGTH = 255  # Length is a single octet, self-inclusive
MAX_RADIUS_PACKET_LENGTH = 4096  # RFC 2865 §3
RADIUS_PACKET_HEADER_LENGTH = 20  # Code(1) + Identifier(1) + Length(2) + Authenticator(16)
MAX_ATTRIBUTES_LENGTH = MAX_RADIUS_PACKET_LENGTH - RADIUS_PACKET_HEADER_LENGTH

# Vendor-Specific layout (RFC 2865 §5.26)
VENDOR_ID_LENGTH = 4
VSA_HEADER_LENGTH = ATTR_HEADER_LENGTH + VENDOR_ID_LENGTH  # 6, before sub-header
MAX_VENDOR_ID = 0xFFFFFFFF

# Continuation flag (RFC 6929 §2.4)
CONTINUATION_MORE = 0x80
CONTINUATION_LAST = 0x00

# Vendor IDs (IANA Private Enterprise Numbers)
VENDOR_MICROSOFT = 311
VENDOR_USR = 429
VENDOR_CISCO = 9
VENDOR_JUNIPER = 2636
VENDOR_FORTINET = 12356
VENDOR_PALO_ALTO = 25461
VENDOR_WIMAX = 24757
VENDOR_ARISTA = 30065

# Cisco VSA Attribute Types (Vendor-Id: 9)
CISCO_AVPAIR = 1  # Cisco-AVPair (shell:priv-lvl=15, etc.)
CISCO_NAS_PORT = 2

# WiMAX VSA Attribute Types (Vendor-Id: 24757, format=1,1,c)
WIMAX_CAPABILITY = 1  # compound
WIMAX_RELEASE = 2
WIMAX_ACCOUNTING_CAPABILITIES = 3
WIMAX_AAA_SESSION_ID = 8
WIMAX_MSK_LIFETIME = 9
WIMAX_MSK = 10
WIMAX_DHCP_MSG_SERVER_IP = 15
WIMAX_QOS_DESCRIPTOR = 21  # compound
WIMAX_DHCPV4_SERVER_ADDRESS = 35
