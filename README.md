# gbexperience

Building blocks for a Game Boy (DMG) emulator. The package covers the parts
of the machine that sit around the CPU:

- **Memory map**: the 16-bit address space. It routes each address to
  cartridge ROM, video RAM, internal RAM and its echo, sprite attribute
  memory (OAM), the I/O registers or high RAM. A write to the `DMA`
  register copies 160 bytes from `value * 0x100` into OAM. Unusable areas
  read as 0 and ignore writes.
- **I/O registers**: joypad (`P1`), `DIV`, the timer registers, LCD control
  and status, scroll and window positions, palettes, and the interrupt
  enable and flag registers. Serial, sound and wave-pattern registers read
  as 0 and ignore writes. Writing `LY` resets it to 0.
- **Joypad**: button state is kept per button. It shows up in the low nibble
  of `P1` for whichever group (direction pad or buttons) is selected by
  bits 4 and 5.
- **Timer**: `Timer.tick(cycles)` increments `DIV` once more than 256
  cycles have built up, then starts counting again from zero.
- **Tiles and sprites**: tiles are decoded from their two bit-planes into
  colour numbers. `Sprite` reads a sprite's position, pattern, flip,
  priority and palette bits live from OAM.
- **Frame buffer and display**: `FrameBuffer` holds screen shades. `UI`
  is a display that shows nothing and only counts the frames it is handed.
  `PygameUI` opens a window that shows frames scaled up four times and
  maps keys to the joypad.

## Modules

| Module | Contents |
| --- | --- |
| `gbexperience.definitions` | LCD timings and sizes, `Colour`, `PixelColour`, `Palette`, `VideoMode`, `SpriteSize`, `ObjectPalette`, `TileDataTableSelect`, `TileMapTableSelect` |
| `gbexperience.memory` | `Memory`, a fixed-size zeroed byte store that raises `MemoryAccessError` on a bad address |
| `gbexperience.input` | `Button`, `JoypadPort`, `ButtonsPressed`, `Input` |
| `gbexperience.mem_io` | `IORegister`, `IO`, `IORegisterError` |
| `gbexperience.memory_map` | `MemoryMap`, `Cartridge`, `InterruptFlag`, `InvalidAddressError` |
| `gbexperience.timer` | `Timer` |
| `gbexperience.tile` | `Tile`, `TileRow`, `decode_row` |
| `gbexperience.sprite` | `Sprite`, a view of one OAM entry |
| `gbexperience.framebuffer` | `FrameBuffer` |
| `gbexperience.user_interface` | `UI`, a display that draws nothing, for headless runs |
| `gbexperience.ui_pygame` | `PygameUI`, `pixel_colour`, `KEY_BINDINGS` |
| `gbexperience.string_utils` | `trim`, `ltrim`, `rtrim`, `read_words`, `parse_hex` |

## Example

```python
from gbexperience.definitions import Colour, PixelColour
from gbexperience.framebuffer import FrameBuffer
from gbexperience.input import Button
from gbexperience.mem_io import IORegister
from gbexperience.memory_map import Cartridge, InterruptFlag, MemoryMap
from gbexperience.tile import Tile, decode_row
from gbexperience.timer import Timer

memory_map = MemoryMap()

# A ROM-only cartridge is given its contents as bytes
rom = bytearray(0x8000)
rom[0x134] = 0xAB
memory_map.load_rom(Cartridge(rom))
assert memory_map.read(0x134) == 0xAB
assert memory_map.write(0x134, 0xFF) == 0      # ROM writes are ignored

# Internal RAM, seen again through the echo region
memory_map.write(0xC100, 0x1F)
assert memory_map.read(0xE100) == 0x1F

# I/O registers live in the same address space
memory_map.write(IORegister.BGP, 0xE4)
assert memory_map.read(IORegister.BGP) == 0xE4

# Interrupt request bits
memory_map.set_interrupt_flag_bit(InterruptFlag.VBLANK, True)
assert memory_map.get_interrupt_flag_bit(InterruptFlag.VBLANK)

# Joypad: select the direction pad, then press Right
memory_map.write(IORegister.P1, 0x20)
memory_map.set_button_pressed(Button.RIGHT, True)
assert memory_map.read(IORegister.P1) == 0x2E

# The divider advances once more than 256 cycles have passed
timer = Timer(memory_map)
timer.tick(300)
assert memory_map.read(IORegister.DIV) == 1

# Each bit position takes one bit from each of two bytes to give a pixel
row = decode_row(0x55, 0x33)
assert row[:4] == [PixelColour.COLOUR0, PixelColour.COLOUR1,
                   PixelColour.COLOUR2, PixelColour.COLOUR3]

# Decode an 8x8 tile from video RAM
tile = Tile(0x8000, memory_map)
assert tile.get_pixel(0, 0) == PixelColour.COLOUR0

# A frame buffer starts out white
buffer = FrameBuffer(160, 144)
buffer.set_pixel(10, 25, Colour.BLACK)
assert buffer.get_pixel(10, 25) == Colour.BLACK
buffer.reset()
assert buffer.get_pixel(10, 25) == Colour.WHITE
```

Bad addresses raise errors. `MemoryMap` raises `InvalidAddressError` for
addresses outside 0x0000–0xFFFF. `IO` raises `IORegisterError` for a
missing register, or for `increment_counter` on anything but `LY` or `DIV`.

## Display

`PygameUI(memory_map)` opens its window on `init_display(title)`. Each call
to `render(buffer)` handles pending window events, draws a 160×144
`FrameBuffer` at four times its size and limits the rate to 60 frames per
second. Closing the window sets `display_enabled` to false. Pass
`headless=True` to keep the window closed. The keys map to the joypad as
follows:

| Key | Button |
| --- | --- |
| W / A / S / D | Up / Left / Down / Right |
| `,` | A |
| `.` | B |
| Return | Start |
| Backspace | Select |

## What this package does not do

- There is no CPU and no instruction execution.
- There is no LCD controller. Nothing steps through the H-Blank, V-Blank,
  OAM and data-transfer modes. Nothing draws background, window or sprite
  lines from video RAM into a `FrameBuffer`, and nothing raises V-Blank or
  LCD STAT interrupts. The caller fills the frame buffer.
- There is no frame-rate counter.
- There is no command-line program or launcher, and ROM files are not read
  from disk. A `Cartridge` is built from bytes the caller supplies, and only
  ROM-only cartridges are supported.
- There is no sound and no serial link.

## Requirements

Python 3.10 or later, and `pygame`. Only `gbexperience.ui_pygame` uses
`pygame`; the other modules do not import it.