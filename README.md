# vinokit

Helpers for working with an inference runtime's installation and its inputs.

- `vinokit.finder` locates the runtime's libraries and its `plugins.xml`
  configuration file.
- `vinokit.errors` maps runtime status codes to exceptions.
- `vinokit.device_type`, `vinokit.element_type` and `vinokit.dimension`
  hold the value types `DeviceType`, `ElementType` and `Dimension`.
- `vinokit.versioning` parses runtime version strings and rejects versions
  older than 2025.1.
- `vinokit.converter` and the `tensor-converter` command turn an image into
  raw tensor bytes.

## Installation

```
pip install vinokit
```

## Converting an image

From the command line:

```
tensor-converter input.jpg output.bin 224x224x3xfp32 nchw
```

The arguments are the input image, the output file, the dimensions as
`[height]x[width]x[channels]x[precision]` and the layout. The precision is
`u8` or `fp32` (case does not matter); the layout is `nchw` or `nhwc` and
defaults to `nchw`. Only 3-channel output is supported. The command exits
with status 1 and a message on standard error if the dimensions cannot be
parsed, the image cannot be converted or the output cannot be written.

From Python:

```python
from vinokit.converter import Dimensions, convert

dims = Dimensions.parse("227x227x3xu8")
data = convert("photo.jpg", dims, "nhwc")
assert len(data) == dims.bytes()
```

`convert` decodes the image, resizes it with bilinear interpolation, puts the
channels in BGR order and returns the bytes in the requested layout. U8 values
take one byte each, FP32 values four. `nhwc_to_nchw` reorders already
converted bytes. Failures raise `ConversionError`.

## Finding a library

```python
from vinokit.finder import Linking, find, find_plugins_xml

path = find("openvino_c", Linking.DYNAMIC)
if path is None:
    print("no installation found")
plugins = find_plugins_xml()
```

`find` builds the platform's file name (`library_filename`) and probes, in
order:

1. `target/release` and `resources/backend` beside the running interpreter;
2. `OPENVINO_BUILD_DIR` with known build subdirectories;
3. `OPENVINO_INSTALL_DIR` and `INTEL_OPENVINO_DIR` with known installation
   subdirectories;
4. the OS library path (`LD_LIBRARY_PATH`, `DYLD_LIBRARY_PATH` or `PATH`);
5. system package directories on Linux, including version-suffixed names such
   as `libopenvino_c.so.2024.1.0`;
6. the default extraction directories under `/opt/intel` or
   `C:\Program Files (x86)\Intel`.

`find_plugins_xml` returns `OPENVINO_PLUGINS_XML` as is when it is set;
otherwise it looks beside the `openvino_c` library and then in the latest
`openvino-<version>` directory next to it. Versions are compared as plain
strings (`build_latest_version`).

## Status codes and errors

```python
from vinokit.errors import InferenceError, Status, check_status

check_status(Status.OK)          # returns quietly
try:
    check_status(Status.NOT_FOUND)
except InferenceError as exc:
    print(exc, exc.status, exc.code)   # "not found", Status.NOT_FOUND, -5
```

A code the runtime does not document gives an `InferenceError` whose
`status` is `None` and whose message is `undefined error code: <code>`.
`LoadingError` carries a `LoadingError.Kind` and optional detail;
`SetupError` wraps either of the two.

## Value types

- `DeviceType("CPU")`, or `DeviceType.CPU`, `.GPU`, `.NPU`, `.GNA`;
  `DeviceType.parse` accepts any name and `is_other()` tells whether it is
  one of the well-known devices. Well-known devices sort before other names.
- `ElementType` is an integer enum of tensor element types; `str()` gives
  names such as `F32`, `BF16` or `Dynamic`.
- `Dimension(min, max).is_dynamic()` is false only when both bounds are the
  same non-negative size.

## Version checks

```python
from vinokit.versioning import check_supported_version, parse_version

parse_version("2025.1.0-18503")            # (2025, 1)
check_supported_version("2024.6.0")        # raises LoadingError
```

## What this package does not do

It does not load the runtime's shared libraries or call into them: there is
no way here to read or compile models, create tensors or run inference. It
only finds the runtime's files, describes its status codes and value types,
and prepares input bytes.

## Running the tests

```
pip install -e ".[test]"
pytest
```