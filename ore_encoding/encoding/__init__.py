# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
This module was made to hold the order-preserving encoders, one submodule per native type.

The general organization is that each submodule `x` deals with a single type and looks like this:

    def encode_x(value: ValueType, ...config params...) -> OrePlaintext:
        ...

and, when an inverse is useful for verification:

    def decode_x(plaintext: OrePlaintext) -> ValueType:
        ...

The "config params" are optional and specific to each encoder. Submodules should not have to take into consideration
how Python types are mapped to encoders, that is done by `ore_encoding.encode`.
"""
