"""Shared fixtures: a small but complete ASA running-config."""

import pytest

from asaxref.analysis.engine import run_analysis
from asaxref.parser import parse_config


SAMPLE_CONFIG = """\
: Saved
:
ASA Version 9.8(4)
!
hostname edge-fw01
!
interface GigabitEthernet0/0
 nameif outside
 security-level 0
 ip address 203.0.113.2 255.255.255.0
!
object network Web01
 host 10.1.1.10
 description Public web server
object network Mail01
 host 10.1.1.20
object network Inside-Net
 subnet 10.1.0.0 255.255.0.0
object network Branch-Net
 subnet 192.168.50.0 255.255.255.0
object network DHCP-Pool
 range 10.1.5.100 10.1.5.200
object network Vendor-Portal
 fqdn v4 portal.vendor.example
object network Mail01-Public
 host 81.144.153.68
object network Mail02
 host 10.1.1.21
 nat (inside,outside) static 81.144.153.69
object service HTTPS-8443
 service tcp destination eq 8443
 description Alternate TLS port
object-group network Anywhere
 network-object 0.0.0.0 0.0.0.0
object-group network Core-Hosts
 network-object host 10.2.2.9
object-group network DMZ-Hosts
 description DMZ tier
 network-object host 10.2.2.5
 group-object Core-Hosts
object-group network Public-Servers
 network-object object Web01
object-group network Local-VPN
 network-object object Inside-Net
object-group service WEB-PORTS tcp
 port-object eq www
 port-object eq https
object-group icmp-type PING
 icmp-object echo
 icmp-object echo-reply
access-list outside_access_in remark Inbound services
access-list outside_access_in extended permit tcp object-group Anywhere object Web01 eq https
access-list outside_access_in extended permit tcp any host 81.144.153.69 eq smtp
access-list outside_access_in extended permit tcp any object-group Public-Servers object-group WEB-PORTS log
access-list outside_access_in extended deny ip any any log
access-list outside_cryptomap_10 extended permit ip object-group Local-VPN object Branch-Net
access-list outside_cryptomap_10 extended permit ip host 10.1.9.9 object Branch-Net
access-list outside_cryptomap_10 extended deny ip any any
access-list outside_cryptomap_20 extended permit ip object Inside-Net object-group Missing-Remote
!
nat (inside,outside) source static Inside-Net Inside-Net destination static Branch-Net Branch-Net no-proxy-arp route-lookup
nat (inside,outside) source static Mail01 Mail01-Public
!
object network Web01
 nat (inside,outside) static 81.144.153.67
object network DHCP-Pool
 nat (inside,outside) dynamic interface
!
nat (inside,outside) after-auto source dynamic any interface
access-group outside_access_in in interface outside
!
crypto ipsec ikev1 transform-set ESP-AES-256-SHA esp-aes-256 esp-sha-hmac
crypto ipsec ikev2 ipsec-proposal AES256
 protocol esp encryption aes-256
 protocol esp integrity sha-256
crypto map outside_map 10 match address outside_cryptomap_10
crypto map outside_map 10 set peer 198.51.100.7
crypto map outside_map 10 set ikev1 transform-set ESP-AES-256-SHA
crypto map outside_map 10 set pfs group14
crypto map outside_map 10 set security-association lifetime seconds 28800
crypto map outside_map 20 match address outside_cryptomap_20
crypto map outside_map 20 set peer 198.51.100.9
crypto map outside_map 20 set ikev2 ipsec-proposal AES256
crypto map outside_map 20 set nat-t-disable
crypto map outside_map 30 match address outside_cryptomap_10
crypto map outside_map 30 set peer 192.0.2.50
crypto map outside_map interface outside
crypto ikev1 policy 10
 authentication pre-share
 encryption aes-256
 hash sha
 group 14
 lifetime 86400
tunnel-group 198.51.100.7 type ipsec-l2l
tunnel-group 198.51.100.7 ipsec-attributes
 ikev1 pre-shared-key *****
tunnel-group 198.51.100.9 type ipsec-l2l
tunnel-group 198.51.100.9 ipsec-attributes
 ikev2 remote-authentication pre-shared-key *****
 ikev2 local-authentication pre-shared-key *****
tunnel-group 192.0.2.50 type remote-access
: end
"""


@pytest.fixture
def sample_text():
    return SAMPLE_CONFIG


@pytest.fixture
def config():
    return parse_config(SAMPLE_CONFIG)


@pytest.fixture
def result(config):
    return run_analysis(config)


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "running-config.txt"
    path.write_text(SAMPLE_CONFIG, encoding="utf-8")
    return path
