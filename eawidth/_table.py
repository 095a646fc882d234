# Generated by eawidth.compile from EastAsianWidth.txt. Do not edit.

UNICODE_VERSION = "14.0.0"

DATA = (
	b"\x00\x00\xa0\x20\x00\x60\x7f\x00\xa0\xa1\x00\x00\xa2\x00\x60\xa4\x00\x00\xa5\x00\x60\xa7\x00\x00"
	b"\xa9\x00\xa0\xaa\x00\x00\xab\x00\xa0\xac\x00\x60\xad\x00\x00\xaf\x00\x60\xb0\x00\x00\xb5\x00\xa0"
	b"\xb6\x00\x00\xbb\x00\xa0\xbc\x00\x00\xc0\x00\xa0\xc6\x00\x00\xc7\x00\xa0\xd0\x00\x00\xd1\x00\xa0"
	b"\xd7\x00\x00\xd9\x00\xa0\xde\x00\x00\xe2\x00\xa0\xe6\x00\x00\xe7\x00\xa0\xe8\x00\x00\xeb\x00\xa0"
	b"\xec\x00\x00\xee\x00\xa0\xf0\x00\x00\xf1\x00\xa0\xf2\x00\x00\xf4\x00\xa0\xf7\x00\x00\xfb\x00\xa0"
	b"\xfc\x00\x00\xfd\x00\xa0\xfe\x00\x00\xff\x00\xa0\x01\x01\x00\x02\x01\xa0\x11\x01\x00\x12\x01\xa0"
	b"\x13\x01\x00\x14\x01\xa0\x1b\x01\x00\x1c\x01\xa0\x26\x01\x00\x28\x01\xa0\x2b\x01\x00\x2c\x01\xa0"
	b"\x31\x01\x00\x34\x01\xa0\x38\x01\x00\x39\x01\xa0\x3f\x01\x00\x43\x01\xa0\x44\x01\x00\x45\x01\xa0"
	b"\x48\x01\x00\x4c\x01\xa0\x4d\x01\x00\x4e\x01\xa0\x52\x01\x00\x54\x01\xa0\x66\x01\x00\x68\x01\xa0"
	b"\x6b\x01\x00\x6c\x01\xa0\xce\x01\x00\xcf\x01\xa0\xd0\x01\x00\xd1\x01\xa0\xd2\x01\x00\xd3\x01\xa0"
	b"\xd4\x01\x00\xd5\x01\xa0\xd6\x01\x00\xd7\x01\xa0\xd8\x01\x00\xd9\x01\xa0\xda\x01\x00\xdb\x01\xa0"
	b"\xdc\x01\x00\xdd\x01\xa0\x51\x02\x00\x52\x02\xa0\x61\x02\x00\x62\x02\xa0\xc4\x02\x00\xc5\x02\xa0"
	b"\xc7\x02\x00\xc8\x02\xa0\xc9\x02\x00\xcc\x02\xa0\xcd\x02\x00\xce\x02\xa0\xd0\x02\x00\xd1\x02\xa0"
	b"\xd8\x02\x00\xdc\x02\xa0\xdd\x02\x00\xde\x02\xa0\xdf\x02\x00\xe0\x02\xa0\x00\x03\x00\x70\x03\xa0"
	b"\x91\x03\x00\xa2\x03\xa0\xa3\x03\x00\xaa\x03\xa0\xb1\x03\x00\xc2\x03\xa0\xc3\x03\x00\xca\x03\xa0"
	b"\x01\x04\x00\x02\x04\xa0\x10\x04\x00\x50\x04\xa0\x51\x04\x00\x52\x04\xa0\x00\x11\x80\x60\x11\xa0"
	b"\x10\x20\x00\x11\x20\xa0\x13\x20\x00\x17\x20\xa0\x18\x20\x00\x1a\x20\xa0\x1c\x20\x00\x1e\x20\xa0"
	b"\x20\x20\x00\x23\x20\xa0\x24\x20\x00\x28\x20\xa0\x30\x20\x00\x31\x20\xa0\x32\x20\x00\x34\x20\xa0"
	b"\x35\x20\x00\x36\x20\xa0\x3b\x20\x00\x3c\x20\xa0\x3e\x20\x00\x3f\x20\xa0\x74\x20\x00\x75\x20\xa0"
	b"\x7f\x20\x00\x80\x20\xa0\x81\x20\x00\x85\x20\xa0\xa9\x20\x40\xaa\x20\xa0\xac\x20\x00\xad\x20\xa0"
	b"\x03\x21\x00\x04\x21\xa0\x05\x21\x00\x06\x21\xa0\x09\x21\x00\x0a\x21\xa0\x13\x21\x00\x14\x21\xa0"
	b"\x16\x21\x00\x17\x21\xa0\x21\x21\x00\x23\x21\xa0\x26\x21\x00\x27\x21\xa0\x2b\x21\x00\x2c\x21\xa0"
	b"\x53\x21\x00\x55\x21\xa0\x5b\x21\x00\x5f\x21\xa0\x60\x21\x00\x6c\x21\xa0\x70\x21\x00\x7a\x21\xa0"
	b"\x89\x21\x00\x8a\x21\xa0\x90\x21\x00\x9a\x21\xa0\xb8\x21\x00\xba\x21\xa0\xd2\x21\x00\xd3\x21\xa0"
	b"\xd4\x21\x00\xd5\x21\xa0\xe7\x21\x00\xe8\x21\xa0\x00\x22\x00\x01\x22\xa0\x02\x22\x00\x04\x22\xa0"
	b"\x07\x22\x00\x09\x22\xa0\x0b\x22\x00\x0c\x22\xa0\x0f\x22\x00\x10\x22\xa0\x11\x22\x00\x12\x22\xa0"
	b"\x15\x22\x00\x16\x22\xa0\x1a\x22\x00\x1b\x22\xa0\x1d\x22\x00\x21\x22\xa0\x23\x22\x00\x24\x22\xa0"
	b"\x25\x22\x00\x26\x22\xa0\x27\x22\x00\x2d\x22\xa0\x2e\x22\x00\x2f\x22\xa0\x34\x22\x00\x38\x22\xa0"
	b"\x3c\x22\x00\x3e\x22\xa0\x48\x22\x00\x49\x22\xa0\x4c\x22\x00\x4d\x22\xa0\x52\x22\x00\x53\x22\xa0"
	b"\x60\x22\x00\x62\x22\xa0\x64\x22\x00\x68\x22\xa0\x6a\x22\x00\x6c\x22\xa0\x6e\x22\x00\x70\x22\xa0"
	b"\x82\x22\x00\x84\x22\xa0\x86\x22\x00\x88\x22\xa0\x95\x22\x00\x96\x22\xa0\x99\x22\x00\x9a\x22\xa0"
	b"\xa5\x22\x00\xa6\x22\xa0\xbf\x22\x00\xc0\x22\xa0\x12\x23\x00\x13\x23\xa0\x1a\x23\x80\x1c\x23\xa0"
	b"\x29\x23\x80\x2b\x23\xa0\xe9\x23\x80\xed\x23\xa0\xf0\x23\x80\xf1\x23\xa0\xf3\x23\x80\xf4\x23\xa0"
	b"\x60\x24\x00\xea\x24\xa0\xeb\x24\x00\x4c\x25\xa0\x50\x25\x00\x74\x25\xa0\x80\x25\x00\x90\x25\xa0"
	b"\x92\x25\x00\x96\x25\xa0\xa0\x25\x00\xa2\x25\xa0\xa3\x25\x00\xaa\x25\xa0\xb2\x25\x00\xb4\x25\xa0"
	b"\xb6\x25\x00\xb8\x25\xa0\xbc\x25\x00\xbe\x25\xa0\xc0\x25\x00\xc2\x25\xa0\xc6\x25\x00\xc9\x25\xa0"
	b"\xcb\x25\x00\xcc\x25\xa0\xce\x25\x00\xd2\x25\xa0\xe2\x25\x00\xe6\x25\xa0\xef\x25\x00\xf0\x25\xa0"
	b"\xfd\x25\x80\xff\x25\xa0\x05\x26\x00\x07\x26\xa0\x09\x26\x00\x0a\x26\xa0\x0e\x26\x00\x10\x26\xa0"
	b"\x14\x26\x80\x16\x26\xa0\x1c\x26\x00\x1d\x26\xa0\x1e\x26\x00\x1f\x26\xa0\x40\x26\x00\x41\x26\xa0"
	b"\x42\x26\x00\x43\x26\xa0\x48\x26\x80\x54\x26\xa0\x60\x26\x00\x62\x26\xa0\x63\x26\x00\x66\x26\xa0"
	b"\x67\x26\x00\x6b\x26\xa0\x6c\x26\x00\x6e\x26\xa0\x6f\x26\x00\x70\x26\xa0\x7f\x26\x80\x80\x26\xa0"
	b"\x93\x26\x80\x94\x26\xa0\x9e\x26\x00\xa0\x26\xa0\xa1\x26\x80\xa2\x26\xa0\xaa\x26\x80\xac\x26\xa0"
	b"\xbd\x26\x80\xbf\x26\x00\xc0\x26\xa0\xc4\x26\x80\xc6\x26\x00\xce\x26\x80\xcf\x26\x00\xd4\x26\x80"
	b"\xd5\x26\x00\xe2\x26\xa0\xe3\x26\x00\xe4\x26\xa0\xe8\x26\x00\xea\x26\x80\xeb\x26\x00\xf2\x26\x80"
	b"\xf4\x26\x00\xf5\x26\x80\xf6\x26\x00\xfa\x26\x80\xfb\x26\x00\xfd\x26\x80\xfe\x26\x00\x00\x27\xa0"
	b"\x05\x27\x80\x06\x27\xa0\x0a\x27\x80\x0c\x27\xa0\x28\x27\x80\x29\x27\xa0\x3d\x27\x00\x3e\x27\xa0"
	b"\x4c\x27\x80\x4d\x27\xa0\x4e\x27\x80\x4f\x27\xa0\x53\x27\x80\x56\x27\xa0\x57\x27\x80\x58\x27\xa0"
	b"\x76\x27\x00\x80\x27\xa0\x95\x27\x80\x98\x27\xa0\xb0\x27\x80\xb1\x27\xa0\xbf\x27\x80\xc0\x27\xa0"
	b"\xe6\x27\x60\xee\x27\xa0\x85\x29\x60\x87\x29\xa0\x1b\x2b\x80\x1d\x2b\xa0\x50\x2b\x80\x51\x2b\xa0"
	b"\x55\x2b\x80\x56\x2b\x00\x5a\x2b\xa0\x80\x2e\x80\x9a\x2e\xa0\x9b\x2e\x80\xf4\x2e\xa0\x00\x2f\x80"
	b"\xd6\x2f\xa0\xf0\x2f\x80\xfc\x2f\xa0\x00\x30\x20\x01\x30\x80\x3f\x30\xa0\x41\x30\x80\x97\x30\xa0"
	b"\x99\x30\x80\x00\x31\xa0\x05\x31\x80\x30\x31\xa0\x31\x31\x80\x8f\x31\xa0\x90\x31\x80\xe4\x31\xa0"
	b"\xf0\x31\x80\x1f\x32\xa0\x20\x32\x80\x48\x32\x00\x50\x32\x80\xc0\x4d\xa0\x00\x4e\x80\x8d\xa4\xa0"
	b"\x90\xa4\x80\xc7\xa4\xa0\x60\xa9\x80\x7d\xa9\xa0\x00\xac\x80\xa4\xd7\xa0\x00\xe0\x00\x00\xf9\x80"
	b"\x00\xfb\xa0\x00\xfe\x00\x10\xfe\x80\x1a\xfe\xa0\x30\xfe\x80\x53\xfe\xa0\x54\xfe\x80\x67\xfe\xa0"
	b"\x68\xfe\x80\x6c\xfe\xa0\x01\xff\x20\x61\xff\x40\xbf\xff\xa0\xc2\xff\x40\xc8\xff\xa0\xca\xff\x40"
	b"\xd0\xff\xa0\xd2\xff\x40\xd8\xff\xa0\xda\xff\x40\xdd\xff\xa0\xe0\xff\x20\xe7\xff\xa0\xe8\xff\x40"
	b"\xef\xff\xa0\xfd\xff\x00\xfe\xff\xa0\xe0\x6f\x81\xe5\x6f\xa1\xf0\x6f\x81\xf2\x6f\xa1\x00\x70\x81"
	b"\xf8\x87\xa1\x00\x88\x81\xd6\x8c\xa1\x00\x8d\x81\x09\x8d\xa1\xf0\xaf\x81\xf4\xaf\xa1\xf5\xaf\x81"
	b"\xfc\xaf\xa1\xfd\xaf\x81\xff\xaf\xa1\x00\xb0\x81\x23\xb1\xa1\x50\xb1\x81\x53\xb1\xa1\x64\xb1\x81"
	b"\x68\xb1\xa1\x70\xb1\x81\xfc\xb2\xa1\x04\xf0\x81\x05\xf0\xa1\xcf\xf0\x81\xd0\xf0\xa1\x00\xf1\x01"
	b"\x0b\xf1\xa1\x10\xf1\x01\x2e\xf1\xa1\x30\xf1\x01\x6a\xf1\xa1\x70\xf1\x01\x8e\xf1\x81\x8f\xf1\x01"
	b"\x91\xf1\x81\x9b\xf1\x01\xad\xf1\xa1\x00\xf2\x81\x03\xf2\xa1\x10\xf2\x81\x3c\xf2\xa1\x40\xf2\x81"
	b"\x49\xf2\xa1\x50\xf2\x81\x52\xf2\xa1\x60\xf2\x81\x66\xf2\xa1\x00\xf3\x81\x21\xf3\xa1\x2d\xf3\x81"
	b"\x36\xf3\xa1\x37\xf3\x81\x7d\xf3\xa1\x7e\xf3\x81\x94\xf3\xa1\xa0\xf3\x81\xcb\xf3\xa1\xcf\xf3\x81"
	b"\xd4\xf3\xa1\xe0\xf3\x81\xf1\xf3\xa1\xf4\xf3\x81\xf5\xf3\xa1\xf8\xf3\x81\x3f\xf4\xa1\x40\xf4\x81"
	b"\x41\xf4\xa1\x42\xf4\x81\xfd\xf4\xa1\xff\xf4\x81\x3e\xf5\xa1\x4b\xf5\x81\x4f\xf5\xa1\x50\xf5\x81"
	b"\x68\xf5\xa1\x7a\xf5\x81\x7b\xf5\xa1\x95\xf5\x81\x97\xf5\xa1\xa4\xf5\x81\xa5\xf5\xa1\xfb\xf5\x81"
	b"\x50\xf6\xa1\x80\xf6\x81\xc6\xf6\xa1\xcc\xf6\x81\xcd\xf6\xa1\xd0\xf6\x81\xd3\xf6\xa1\xd5\xf6\x81"
	b"\xd8\xf6\xa1\xdd\xf6\x81\xe0\xf6\xa1\xeb\xf6\x81\xed\xf6\xa1\xf4\xf6\x81\xfd\xf6\xa1\xe0\xf7\x81"
	b"\xec\xf7\xa1\xf0\xf7\x81\xf1\xf7\xa1\x0c\xf9\x81\x3b\xf9\xa1\x3c\xf9\x81\x46\xf9\xa1\x47\xf9\x81"
	b"\x00\xfa\xa1\x70\xfa\x81\x75\xfa\xa1\x78\xfa\x81\x7d\xfa\xa1\x80\xfa\x81\x87\xfa\xa1\x90\xfa\x81"
	b"\xad\xfa\xa1\xb0\xfa\x81\xbb\xfa\xa1\xc0\xfa\x81\xc6\xfa\xa1\xd0\xfa\x81\xda\xfa\xa1\xe0\xfa\x81"
	b"\xe8\xfa\xa1\xf0\xfa\x81\xf7\xfa\xa1\x00\x00\x82\xfe\xff\xa2\x00\x00\x83\xfe\xff\xa3\x00\x01\x0e"
	b"\xf0\x01\xae\x00\x00\x0f\xfe\xff\xaf\x00\x00\x10\xfe\xff\xb0"
)
