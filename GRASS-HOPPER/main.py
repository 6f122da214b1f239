"""
╔══════════════════════════════════════════╗
║   🦗  GRASS HOPPER  🦗                    ║
║   Python 3.8+  |  pip install pygame     ║
║   python main.py                         ║
╚══════════════════════════════════════════╝

โครงสร้างไฟล์:
  main.py      — จุดเริ่มต้น
  config.py    — ค่าคงที่และข้อมูลเกม
  themes.py    — palette ของแต่ละสถานที่ (forest / meadow / swamp)
  grass.py     — หญ้าสองชั้นที่โยกตามเมาส์
  entities.py  — Bug, Swarm
  renderer.py  — วาดฉาก forest ตามลำดับความลึก
  scene.py     — สถานะเกม (title / forest / map) + inventory
  ui.py        — title, globe, inventory, world map
  audio.py     — ระบบเสียง (procedural)
  game.py      — Game loop หลัก

ปุ่ม: Enter = เริ่ม, Tab = แผนที่, 1/2/3 = เลือกสถานที่, Esc = ปิดแผนที่, F2 = เปิด/ปิดเสียง
"""

from game import Game


def main():
    game = Game()
    game.run()


if __name__ == "__main__":
    main()
