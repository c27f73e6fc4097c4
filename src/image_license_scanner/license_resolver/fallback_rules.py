# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

"""Curated package name -> license table used when nothing better is known.

Patterns use shell glob semantics and are checked in order, the first match
wins. Specific patterns sit before the broader families that would shadow
them, and the table always ends with a catch-all.
"""

from dataclasses import dataclass
from fnmatch import fnmatchcase

OSI_APPROVED = "OSI-Approved"


@dataclass(frozen=True)
class FallbackRule:
    name_pattern: str
    license: str

    def matches(self, package_name: str) -> bool:
        return fnmatchcase(package_name, self.name_pattern)


_FALLBACK_TABLE: list[tuple[str, str]] = [
    # Core system packages
    ("adduser", "GPL-2.0"),
    ("apt", "GPL-2.0"),
    ("apt-utils", "GPL-2.0"),
    ("base-passwd", "GPL-2.0"),
    ("bash", "GPL-2.0"),
    ("coreutils", "GPL-2.0"),
    ("dpkg", "GPL-2.0"),
    ("findutils", "GPL-2.0"),
    ("grep", "GPL-2.0"),
    ("gzip", "GPL-2.0"),
    ("hostname", "GPL-2.0"),
    ("login", "GPL-2.0"),
    ("passwd", "GPL-2.0"),
    ("sed", "GPL-2.0"),
    ("tar", "GPL-2.0"),
    ("util-linux", "GPL-2.0"),
    # System utilities
    ("bsdutils", "GPL-2.0"),
    ("debianutils", "GPL-2.0"),
    ("diffutils", "GPL-2.0"),
    ("e2fsprogs", "GPL-2.0"),
    ("fdisk", "GPL-2.0"),
    ("mount", "GPL-2.0"),
    ("procps", "GPL-2.0"),
    ("psmisc", "GPL-2.0"),
    ("sensible-utils", "GPL-2.0"),
    ("sysvinit-utils", "GPL-2.0"),
    # Base system
    ("base-files", "GPL"),
    ("dash", "BSD"),
    ("debconf", "BSD"),
    # Network and security
    ("ca-certificates", "MPL-2.0"),
    ("curl", "MIT"),
    ("libcurl*", "MIT"),
    ("wget", "GPL-3.0"),
    ("openssh*", "BSD"),
    ("gpgv", "GPL-3.0"),
    ("gnupg*", "GPL-3.0"),
    # File system and permissions
    ("acl", "LGPL-2.1"),
    ("attr", "LGPL-2.1"),
    # GCC runtime
    ("gcc-*", "GPL-3.0"),
    ("libgcc*", "GPL-3.0"),
    ("libstdc++*", "GPL-3.0"),
    ("libgomp*", "GPL-3.0"),
    # GNU C library
    ("libc6", "LGPL-2.1"),
    ("libc6-dev", "LGPL-2.1"),
    ("libc-bin", "LGPL-2.1"),
    ("glibc*", "LGPL-2.1"),
    # Crypto libraries
    ("libssl*", "Apache-1.0"),
    ("openssl", "Apache-1.0"),
    ("libcrypto*", "Apache-1.0"),
    ("libgcrypt*", "LGPL-2.1"),
    ("libgnutls*", "LGPL-2.1"),
    # System libraries
    ("libselinux*", "LGPL-2.1"),
    ("libcap2*", "GPL-2.0"),
    ("libcap*", "LGPL-2.1"),
    ("libacl*", "LGPL-2.1"),
    ("libattr*", "LGPL-2.1"),
    ("libcrypt*", "LGPL"),
    # PAM and authentication
    ("libpam*", "GPL-2.0"),
    ("pam-*", "GPL-2.0"),
    # Compression libraries
    ("libzmq*", "LGPL-3.0"),
    ("zlib*", "Zlib"),
    ("libz*", "Zlib"),
    ("liblzma*", "GPL-2.0"),
    ("xz-utils", "GPL-2.0"),
    ("libbz2*", "BSD"),
    ("bzip2", "BSD"),
    ("libbrotli*", "MIT"),
    # File system libraries
    ("libblkid*", "LGPL-2.1"),
    ("libmount*", "LGPL-2.1"),
    ("libuuid*", "LGPL-2.1"),
    ("libext2fs*", "LGPL-2.1"),
    ("libcom-err*", "LGPL-2.1"),
    # Database libraries
    ("libdbus*", "GPL-2.0"),
    ("libdb5*", "Sleepycat"),
    ("libdb*", "BSD"),
    ("libgdbm*", "BSD"),
    # Math libraries
    ("libgmp*", "LGPL-3.0"),
    ("libmpfr*", "LGPL-3.0"),
    ("libmpc*", "LGPL-3.0"),
    ("libapt-pkg*", "GPL-2.0"),
    ("libaudit*", "LGPL-2.1"),
    ("gettext*", "GPL-3.0"),
    ("jq", "MIT"),
    ("init-system-helpers", "BSD"),
    ("libdebconfclient*", "BSD"),
    # Crypto and security libraries
    ("libgpg-error*", "LGPL-2.1"),
    ("libgssapi-krb5*", "MIT"),
    ("libk5crypto*", "MIT"),
    ("libkeyutils*", "MIT"),
    ("libkrb5*", "MIT"),
    ("libhogweed*", "LGPL-3.0"),
    ("libnettle*", "LGPL-3.0"),
    # Internationalization libraries
    ("libicu*", "Unicode"),
    ("libidn*", "LGPL-2.1"),
    ("libjq*", "MIT"),
    # Network libraries
    ("libldap*", "OpenLDAP"),
    ("libnghttp*", "MIT"),
    ("libpsl*", "MIT"),
    ("librtmp*", "LGPL-2.1"),
    ("libsasl*", "BSD"),
    ("libssh*", "LGPL-2.1"),
    ("libncurses*", "MIT"),
    ("libtinfo*", "MIT"),
    ("ncurses-*", "MIT"),
    ("libprocps*", "LGPL-2.0"),
    ("libreadline*", "GPL-3.0"),
    ("readline-*", "GPL-3.0"),
    ("libsmartcols*", "LGPL-2.1"),
    ("libsystemd*", "LGPL-2.1"),
    ("libudev*", "LGPL-2.1"),
    ("liblz4*", "BSD-2-Clause"),
    ("libxxhash*", "BSD-2-Clause"),
    ("libnl-*", "LGPL-2.1"),
    ("libnsl*", "LGPL-2.1"),
    ("libtirpc*", "BSD"),
    ("libwrap*", "BSD"),
    ("libp11-kit*", "BSD"),
    ("libseccomp*", "LGPL-2.1"),
    ("libsemanage*", "LGPL-2.1"),
    ("libsepol*", "LGPL-2.1"),
    ("libtasn1*", "LGPL-2.1"),
    # Text processing libraries
    ("libonig*", "BSD-2-Clause"),
    ("libunistring*", "LGPL-3.0"),
    ("libpq*", "PostgreSQL"),
    ("postgresql-*", "PostgreSQL"),
    ("libpopt*", "MIT"),
    ("libss*", "MIT"),
    ("logsave", "GPL-2.0"),
    ("libperl*", "Artistic | GPL-1.0+"),
    # System configuration
    ("lsb-base", "GPL-2.0"),
    ("netbase", "GPL-2.0"),
    ("ubuntu-keyring", "GPL-2.0"),
    ("usrmerge", "GPL-2.0"),
    ("nfs4-acl-tools", "BSD"),
    ("quota", "GPL-2.0"),
    ("rsync", "GPL-3.0"),
    ("sudo", "ISC"),
    ("tree", "GPL-2.0"),
    ("zip", "BSD-like"),
    # Application libraries
    ("libmemcached*", "BSD-3-Clause"),
    ("libyaml*", "MIT"),
    ("libevent*", "BSD-3-Clause"),
    ("libev*", "BSD-2-Clause"),
    ("libhiredis*", "BSD-3-Clause"),
    ("libjansson*", "MIT"),
    ("libjemalloc*", "BSD-2-Clause"),
    ("libmsgpack*", "Boost-1.0"),
    ("libprotobuf*", "BSD-3-Clause"),
    ("libsnappy*", "BSD-3-Clause"),
    ("libtcmalloc*", "BSD-3-Clause"),
    ("libunwind*", "MIT"),
    ("libuv*", "MIT"),
    # Graphics and media libraries
    ("libpng*", "PNG"),
    ("libjpeg*", "IJG"),
    ("libfreetype*", "FTL"),
    ("libfontconfig*", "MIT"),
    ("libsodium*", "ISC"),
    ("libargon2*", "Apache-2.0"),
    ("libproc*", "LGPL-2.0"),
    ("libsecret*", "LGPL-2.1"),
    ("libcheck*", "LGPL-2.1"),
    ("libcunit*", "LGPL-2.0"),
    ("libffi*", "MIT"),
    ("libexpat*", "MIT"),
    ("libxml*", "MIT"),
    ("libpcre*", "BSD"),
    ("mawk", "GPL-2.0"),
    ("gawk", "GPL-2.0"),
    ("dpkg-dev", "GPL-2.0"),
    ("systemd*", "LGPL-2.1"),
    # Interpreters
    ("perl*", "Artistic | GPL-1.0+"),
    ("python3*", "PSF"),
    ("libaio*", "LGPL-2.1"),
    ("libarchive*", "BSD-2-Clause"),
    ("libbsd*", "BSD-3-Clause"),
    ("libedit*", "BSD-3-Clause"),
    ("libelf*", "LGPL-2.1"),
    ("libglib*", "LGPL-2.1"),
    ("libgpgme*", "LGPL-2.1"),
    ("libjson*", "MIT"),
    ("libkmod*", "LGPL-2.1"),
    ("libmagic*", "BSD-2-Clause"),
    ("libpcap*", "BSD-3-Clause"),
    ("libpthread*", "LGPL-2.1"),
    ("libsqlite*", "Public-Domain"),
    ("libtool*", "GPL-2.0"),
    ("libusb*", "LGPL-2.1"),
    ("libx11*", "MIT"),
    ("libxcb*", "MIT"),
    ("libxslt*", "MIT"),
    # Anything else is still open source, just not individually curated
    ("*", OSI_APPROVED),
]

FALLBACK_RULES: tuple[FallbackRule, ...] = tuple(
    FallbackRule(name_pattern=pattern, license=license)
    for pattern, license in _FALLBACK_TABLE
)


def lookup_fallback_license(
    package_name: str, rules: tuple[FallbackRule, ...] | list[FallbackRule]
) -> str | None:
    for rule in rules:
        if rule.matches(package_name):
            return rule.license
    return None
